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
"""Ranges of an utterance tagged as slots or entities, and the validation and
token alignment shared by both kinds of tagging.
"""
# Standard
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

# First Party
from caikit.core.exceptions import error_handler
import alog

# Local
from ..data_model import EntityMetadata
from .exceptions import InvalidRangeError
from .token import UtteranceToken

log = alog.use_channel("UTT_RANGE")
error = error_handler.get(log)


@dataclass(frozen=True)
class UtteranceRange:
    # Inclusive token indices
    start_token_idx: int
    end_token_idx: int
    # Character offsets, end excluded
    start_pos: int
    end_pos: int

    def covers(self, token_idx: int) -> bool:
        return self.start_token_idx <= token_idx <= self.end_token_idx


@dataclass(frozen=True)
class UtteranceSlot(UtteranceRange):
    name: str
    source: str
    value: str
    confidence: float


@dataclass(frozen=True)
class UtteranceEntity(UtteranceRange):
    type: str
    value: str
    confidence: float
    metadata: EntityMetadata


def text_length(tokens: Sequence[UtteranceToken]) -> int:
    """Length of the text reconstructed from the tokens"""
    if not tokens:
        return 0
    last = tokens[-1]
    return last.offset + len(last.value)


def validate_range(tokens: Sequence[UtteranceToken], start: int, end: int):
    """Raise InvalidRangeError unless 0 <= start <= end <= text length"""
    max_end = text_length(tokens)
    if start < 0 or start > end or start > max_end or end > max_end:
        error(
            "<NLU81524309E>",
            InvalidRangeError(
                "Invalid range [{}, {}) for utterance of length {}".format(
                    start, end, max_end
                )
            ),
        )


def align_range(
    tokens: Sequence[UtteranceToken], start: int, end: int
) -> Optional[Tuple[int, int]]:
    """Find the tokens lying entirely inside [start, end).

    Returns:
        Optional[Tuple[int, int]]
            Index of the first and last contained token, or None when the
            range contains no whole token
    """
    validate_range(tokens, start, end)
    contained = [
        token.index
        for token in tokens
        if token.offset >= start and token.offset + len(token.value) <= end
    ]
    if not contained:
        log.debug2("Range [%d, %d) contains no whole token", start, end)
        return None
    return contained[0], contained[-1]
