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
"""Per position unit of an utterance
"""
# Standard
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

# Third Party
import numpy as np

# Local
from ..data_model import PartOfSpeech
from ..toolkit.token_utils import convert_to_real_spaces, is_space, is_word

if TYPE_CHECKING:
    # Local
    from .ranges import UtteranceEntity, UtteranceSlot
    from .utterance import Utterance


@dataclass(frozen=True)
class TokenToStringOptions:
    lower_case: bool = False
    real_spaces: bool = True
    trim: bool = False


DEFAULT_TOKEN_TO_STRING_OPTIONS = TokenToStringOptions()


class UtteranceToken:
    """A token of an utterance. Tokens are created by their Utterance and keep
    a reference to it: slots, entities, tfidf and cluster are looked up in the
    utterance's current state each time they are read.
    """

    __slots__ = (
        "_utterance",
        "_index",
        "_value",
        "_vector",
        "_part_of_speech",
        "_offset",
        "_is_word",
        "_is_space",
    )

    def __init__(
        self,
        utterance: "Utterance",
        index: int,
        value: str,
        vector: np.ndarray,
        part_of_speech: PartOfSpeech,
        offset: int,
    ):
        self._utterance = utterance
        self._index = index
        self._value = value
        self._vector = vector
        self._part_of_speech = part_of_speech
        self._offset = offset
        self._is_word = is_word(value)
        self._is_space = is_space(value)

    @property
    def index(self) -> int:
        return self._index

    @property
    def value(self) -> str:
        return self._value

    @property
    def vector(self) -> np.ndarray:
        return self._vector

    @property
    def part_of_speech(self) -> PartOfSpeech:
        return self._part_of_speech

    @property
    def offset(self) -> int:
        """Character offset of the token in the utterance text"""
        return self._offset

    @property
    def is_word(self) -> bool:
        return self._is_word

    @property
    def is_space(self) -> bool:
        return self._is_space

    @property
    def is_bos(self) -> bool:
        return self._index == 0

    @property
    def is_eos(self) -> bool:
        return self._index == len(self._utterance.tokens) - 1

    @property
    def tfidf(self) -> float:
        return self._utterance.tfidf_for(self._value)

    @property
    def cluster(self) -> int:
        return self._utterance.cluster_for(self._vector)

    @property
    def slots(self) -> Tuple["UtteranceSlot", ...]:
        return self._utterance.slots_for_token(self._index)

    @property
    def entities(self) -> Tuple["UtteranceEntity", ...]:
        return self._utterance.entities_for_token(self._index)

    def to_string(self, options: Optional[TokenToStringOptions] = None) -> str:
        """Render the token text, applying lowercase, then placeholder to real
        spaces, then trim.
        """
        options = options or DEFAULT_TOKEN_TO_STRING_OPTIONS
        result = self._value
        if options.lower_case:
            result = result.lower()
        if options.real_spaces:
            result = convert_to_real_spaces(result)
        if options.trim:
            result = result.strip()
        return result

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return "UtteranceToken(index={}, value={!r}, pos={})".format(
            self._index, self._value, self._part_of_speech.value
        )
