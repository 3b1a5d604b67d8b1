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
"""Pre-parser for authoring-time utterances carrying inline slot annotations
with the bracketed syntax: "book a flight to [Paris](destination)".
"""
# Standard
from dataclasses import dataclass, field
from typing import List, Optional
import re

# First Party
from caikit.core.exceptions import error_handler
import alog

log = alog.use_channel("UTT_PARSE")
error = error_handler.get(log)

ALL_SLOTS_REGEX = re.compile(r"\[(.+?)\]\(([\w_\. :-]+)\)", re.IGNORECASE)


@dataclass
class SlotPosition:
    start: int
    end: int


@dataclass
class ParsedSlot:
    name: str
    value: str
    # Position of the whole "[value](name)" markup in the raw utterance
    raw_position: SlotPosition
    # Position of the value in the cleaned utterance
    clean_position: SlotPosition


@dataclass
class UtterancePart:
    text: str
    slot: Optional[ParsedSlot] = None


@dataclass
class ParsedUtterance:
    utterance: str
    parsed_slots: List[ParsedSlot] = field(default_factory=list)
    parts: List[UtterancePart] = field(default_factory=list)


def parse_utterance(utterance: str) -> ParsedUtterance:
    """Strip the slot markup from an utterance and keep track of where each
    slot value lands in the cleaned text.

    Args:
        utterance: str
            Raw utterance, possibly containing "[value](slot)" markup

    Returns:
        ParsedUtterance
            The cleaned utterance, the parsed slots and the ordered parts of
            text (each part optionally tied to the slot it comes from)
    """
    error.type_check("<NLU60317245E>", str, utterance=utterance)

    parsed = ParsedUtterance(utterance="")
    cursor = 0
    for match in ALL_SLOTS_REGEX.finditer(utterance):
        value, name = match.group(1), match.group(2)
        preceding = utterance[cursor : match.start()]
        if preceding:
            parsed.parts.append(UtterancePart(text=preceding))

        clean_start = len(parsed.utterance) + len(preceding)
        slot = ParsedSlot(
            name=name,
            value=value,
            raw_position=SlotPosition(start=match.start(), end=match.end()),
            clean_position=SlotPosition(
                start=clean_start, end=clean_start + len(value)
            ),
        )
        parsed.utterance += preceding + value
        parsed.parsed_slots.append(slot)
        parsed.parts.append(UtterancePart(text=value, slot=slot))
        cursor = match.end()

    if cursor < len(utterance):
        parsed.parts.append(UtterancePart(text=utterance[cursor:]))
        parsed.utterance += utterance[cursor:]

    return parsed
