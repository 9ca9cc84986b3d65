"""Surname readings preferred over common readings in ``surname`` mode.

Only surnames whose surname reading differs from the everyday reading of the
same character (or whose compound form needs a fixed reading) are listed.
"""

from __future__ import annotations

SURNAME_PINYIN = {
    # compound surnames
    "万俟": "mò qí",
    "尉迟": "yù chí",
    "单于": "chán yú",
    "长孙": "zhǎng sūn",
    "澹台": "tán tái",
    "令狐": "líng hú",
    "皇甫": "huáng fǔ",
    "司马": "sī mǎ",
    "欧阳": "ōu yáng",
    "上官": "shàng guān",
    "夏侯": "xià hóu",
    "诸葛": "zhū gě",
    "东方": "dōng fāng",
    "宇文": "yǔ wén",
    "公孙": "gōng sūn",
    "慕容": "mù róng",
    "闻人": "wén rén",
    "乐正": "yuè zhèng",
    # single-character surnames
    "区": "ōu",
    "仇": "qiú",
    "单": "shàn",
    "朴": "piáo",
    "查": "zhā",
    "曾": "zēng",
    "解": "xiè",
    "缪": "miào",
    "翟": "zhái",
    "乐": "yuè",
    "盖": "gě",
    "种": "chóng",
    "覃": "qín",
    "员": "yùn",
    "华": "huà",
    "宁": "nìng",
    "燕": "yān",
    "任": "rén",
    "纪": "jǐ",
    "秘": "bì",
    "繁": "pó",
    "句": "gōu",
    "召": "shào",
    "折": "shé",
    "尉": "wèi",
    "曲": "qū",
    "薄": "bó",
    "柏": "bǎi",
    "能": "nài",
    "隗": "wěi",
    "过": "guō",
    "卜": "bǔ",
    "阚": "kàn",
    "都": "dū",
    "么": "yāo",
    "哈": "hǎ",
    "冼": "xiǎn",
    "黑": "hè",
}
