"""Shared fixtures: an in-memory dictionary standing in for pypinyin."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from hanzi_pinyin.dictionary.resolver import iter_script_spans, non_chinese_tokens

READINGS = {
    "中": "zhōng",
    "国": "guó",
    "汉": "hàn",
    "语": "yǔ",
    "拼": "pīn",
    "音": "yīn",
    "我": "wǒ",
    "爱": "ài",
    "你": "nǐ",
    "的": "de",
    "绿": "lǜ",
    "女": "nǚ",
    "学": "xué",
    "行": "xíng",
    "曾": "céng",
    "光": "guāng",
}


@dataclass
class MappingDictionary:
    """Per-character dictionary that records every call it receives."""

    readings: dict[str, str] = field(default_factory=lambda: dict(READINGS))
    multiple: dict[str, str] = field(default_factory=lambda: {"行": "xíng háng"})
    surnames: dict[str, str] = field(default_factory=lambda: {"曾": "zēng"})
    calls: list[tuple[str, int, str, str]] = field(default_factory=list)

    def resolve_tokens(self, text, logical_length, *, mode, non_zh, use_custom_dictionary):
        self.calls.append((text, logical_length, mode, non_zh))
        tokens: list[str] = []
        for chinese, span in iter_script_spans(text):
            if not chinese:
                tokens.extend(non_chinese_tokens(span, non_zh))
                continue
            for char in span:
                if mode == "surname" and char in self.surnames:
                    tokens.append(self.surnames[char])
                else:
                    tokens.append(self.readings.get(char, char))
        return tuple(tokens)

    def resolve_run(self, text, logical_length, *, mode, non_zh, use_custom_dictionary):
        return " ".join(
            self.resolve_tokens(
                text,
                logical_length,
                mode=mode,
                non_zh=non_zh,
                use_custom_dictionary=use_custom_dictionary,
            )
        )

    def resolve_multiple(self, char):
        return self.multiple.get(char, self.readings.get(char, char))

    def custom_dictionary_active(self):
        return False


@pytest.fixture
def dictionary() -> MappingDictionary:
    return MappingDictionary()
