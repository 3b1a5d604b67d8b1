# Copyright The Caikit Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Helpers to classify token strings produced by the external tokenizer.

The tokenizer marks spaces it keeps inside tokens with a placeholder character
(SPACE) so that every token stays visibly non-empty.
"""
# Standard
from typing import List
import re

# Placeholder used by tokenizers for spaces kept inside tokens
SPACE = "▁"

SPECIAL_CHARSET: List[str] = list(
    "¿÷≥≤µ˜∫√≈æ…¬˚˙©+-_!@#$%?&*()/\\[]{}:;<>=.,~`\"'"
)

SPECIAL_CHARS_REGEX = re.compile(
    "|".join(re.escape(char) for char in SPECIAL_CHARSET)
)


def is_space_char(char: str) -> bool:
    return char == SPACE or char.isspace()


def has_space(value: str) -> bool:
    return any(is_space_char(char) for char in value)


def is_space(value: str) -> bool:
    """True when every character of value is a space or a space placeholder"""
    return all(is_space_char(char) for char in value)


def is_word(value: str) -> bool:
    """True when value holds neither special characters nor spaces"""
    return SPECIAL_CHARS_REGEX.search(value) is None and not has_space(value)


def convert_to_real_spaces(value: str) -> str:
    return value.replace(SPACE, " ")
