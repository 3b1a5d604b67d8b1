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
"""The Utterance: the tokens of one input sentence along with their vectors,
part of speech tags and the slots and entities tagged over them.
"""
# Standard
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union
import re

# Third Party
import numpy as np

# First Party
from caikit.core.exceptions import error_handler
import alog

# Local
from ..data_model import ExtractedEntity, ExtractedSlot, PartOfSpeech
from ..toolkit.token_utils import SPECIAL_CHARSET, convert_to_real_spaces
from .exceptions import DimensionMismatchError
from .ranges import UtteranceEntity, UtteranceSlot, align_range
from .token import UtteranceToken
from .tools import ClusteringModel

log = alog.use_channel("UTTRNC")
error = error_handler.get(log)

VectorType = Union[Sequence[float], np.ndarray]


class SlotsStrategy(str, Enum):
    KEEP_VALUE = "keep-value"
    KEEP_NAME = "keep-name"
    IGNORE = "ignore"


class EntitiesStrategy(str, Enum):
    KEEP_DEFAULT = "keep-default"
    KEEP_VALUE = "keep-value"
    KEEP_NAME = "keep-name"
    IGNORE = "ignore"


@dataclass(frozen=True)
class UtteranceToStringOptions:
    """Options to render an utterance as text.

    Attributes:
        lower_case: bool
            Lowercase the rendered text
        only_words: bool
            Only render word tokens and tokens carrying a slot or an entity
        slots: SlotsStrategy
            How to render slot tokens: their text (keep-value), the slot name
            (keep-name) or nothing (ignore)
        entities: EntitiesStrategy
            How to render entity tokens that carry no slot: their text
            (keep-default), the entity value (keep-value), the entity type
            (keep-name) or nothing (ignore)
    """

    lower_case: bool = False
    only_words: bool = False
    slots: SlotsStrategy = SlotsStrategy.KEEP_VALUE
    entities: EntitiesStrategy = EntitiesStrategy.IGNORE

    def __post_init__(self):
        # Accept plain strings such as "keep-name"
        object.__setattr__(self, "slots", SlotsStrategy(self.slots))
        object.__setattr__(self, "entities", EntitiesStrategy(self.entities))


DEFAULT_UTTERANCE_TO_STRING_OPTIONS = UtteranceToStringOptions()


class Utterance:
    """Tokens of a sentence with their vectors, POS tags, slots and entities.

    The token sequence is fixed at construction. Slots and entities only grow
    through tag_slot / tag_entity, each call replacing the tuple with a new
    one, so a tuple obtained earlier never changes.

    The TF-IDF table and the clustering model are set after construction and
    are expected to be set before the utterance is shared between readers; no
    locking is done.
    """

    def __init__(
        self,
        tokens: Sequence[str],
        vectors: Sequence[VectorType],
        pos_tags: Sequence[Union[str, PartOfSpeech]],
        language_code: str,
    ):
        """Build the tokens of the utterance.

        Args:
            tokens: Sequence[str]
                Token strings, in order; their concatenation is the utterance
                text
            vectors: Sequence[VectorType]
                One vector per token, all of the same dimensionality
            pos_tags: Sequence[Union[str, PartOfSpeech]]
                One part of speech tag per token
            language_code: str
                Language of the utterance
        """
        error.type_check("<NLU43310957E>", str, language_code=language_code)
        if not len(tokens) == len(vectors) == len(pos_tags):
            error(
                "<NLU09871236E>",
                DimensionMismatchError(
                    "Tokens, vectors and POS tags dimensions must match "
                    "(got {}, {} and {})".format(
                        len(tokens), len(vectors), len(pos_tags)
                    )
                ),
            )

        self._language_code = language_code
        self._slots: Tuple[UtteranceSlot, ...] = ()
        self._entities: Tuple[UtteranceEntity, ...] = ()
        self._global_tfidf: Optional[Dict[str, float]] = None
        self._kmeans: Optional[ClusteringModel] = None
        self._sentence_embedding: Optional[np.ndarray] = None

        token_vectors = [self._to_read_only_vector(vector) for vector in vectors]
        if len({vector.shape for vector in token_vectors}) > 1:
            error(
                "<NLU65202418E>",
                DimensionMismatchError(
                    "All token vectors must share the same dimensionality"
                ),
            )

        built = []
        offset = 0
        for index, (value, vector, pos_tag) in enumerate(
            zip(tokens, token_vectors, pos_tags)
        ):
            built.append(
                UtteranceToken(
                    utterance=self,
                    index=index,
                    value=value,
                    vector=vector,
                    part_of_speech=PartOfSpeech(pos_tag),
                    offset=offset,
                )
            )
            offset += len(value)
        self._tokens: Tuple[UtteranceToken, ...] = tuple(built)

    @staticmethod
    def _to_read_only_vector(vector: VectorType) -> np.ndarray:
        array = np.array(vector, dtype=np.float64)
        if array.ndim != 1:
            error(
                "<NLU31486620E>",
                DimensionMismatchError(
                    "Token vectors must be one dimensional, got shape {}".format(
                        array.shape
                    )
                ),
            )
        array.flags.writeable = False
        return array

    ## Properties ##############################################################

    @property
    def tokens(self) -> Tuple[UtteranceToken, ...]:
        return self._tokens

    @property
    def language_code(self) -> str:
        return self._language_code

    @property
    def slots(self) -> Tuple[UtteranceSlot, ...]:
        return self._slots

    @property
    def entities(self) -> Tuple[UtteranceEntity, ...]:
        return self._entities

    @property
    def sentence_embedding(self) -> np.ndarray:
        """Weighted average of the normalized vectors of the word tokens,
        computed on first access and cached for the lifetime of the utterance.

        Each word token with a non-null vector contributes its unit vector
        weighted by min(1, tfidf). When no token contributes, the embedding is
        a zero vector.
        """
        if self._sentence_embedding is not None:
            return self._sentence_embedding

        dims = len(self._tokens[0].vector) if self._tokens else 0
        embedding = np.zeros(dims, dtype=np.float64)
        total_weight = 0.0
        for token in self._tokens:
            norm = np.linalg.norm(token.vector)
            if norm <= 0 or not token.is_word:
                continue
            weight = min(1.0, token.tfidf)
            total_weight += weight
            embedding += token.vector * (weight / norm)

        if total_weight > 0:
            embedding /= total_weight
        else:
            log.debug(
                "<NLU72583330D>",
                "No token contributes to the sentence embedding of [{}], "
                "using a zero vector".format(self),
            )

        embedding.flags.writeable = False
        self._sentence_embedding = embedding
        return embedding

    ## Token level lookups #####################################################

    def slots_for_token(self, token_idx: int) -> Tuple[UtteranceSlot, ...]:
        return tuple(slot for slot in self._slots if slot.covers(token_idx))

    def entities_for_token(self, token_idx: int) -> Tuple[UtteranceEntity, ...]:
        return tuple(entity for entity in self._entities if entity.covers(token_idx))

    def tfidf_for(self, value: str) -> float:
        """TF-IDF weight of a token value, 1 when unknown"""
        return (self._global_tfidf and self._global_tfidf.get(value)) or 1

    def cluster_for(self, vector: VectorType) -> int:
        """Nearest cluster of a token vector, 1 when no model is set"""
        if self._kmeans is None:
            return 1
        return self._kmeans.nearest([vector])[0] or 1

    ## Setters #################################################################

    def set_global_tfidf(self, tfidf: Optional[Mapping[str, float]]):
        self._global_tfidf = dict(tfidf) if tfidf is not None else None

    def set_kmeans(self, kmeans: Optional[ClusteringModel] = None):
        self._kmeans = kmeans

    ## Rendering ###############################################################

    def to_string(self, options: Optional[UtteranceToStringOptions] = None) -> str:
        """Rebuild the text of the utterance.

        Tokens carrying a slot are rendered following options.slots first;
        only tokens without an applicable slot rendering fall back to
        options.entities.

        Args:
            options: Optional[UtteranceToStringOptions]
                Rendering options, defaults to the raw text

        Returns:
            str
                The rendered text, with real spaces
        """
        options = options or DEFAULT_UTTERANCE_TO_STRING_OPTIONS

        tokens = self._tokens
        if options.only_words:
            tokens = [
                token
                for token in tokens
                if token.is_word or token.slots or token.entities
            ]

        rendered = []
        for token in tokens:
            slots = token.slots
            entities = token.entities
            if not slots and not entities:
                rendered.append(token.value)
            elif slots and options.slots == SlotsStrategy.KEEP_NAME:
                rendered.append(slots[0].name)
            elif slots and options.slots == SlotsStrategy.KEEP_VALUE:
                rendered.append(token.value)
            elif entities and options.entities == EntitiesStrategy.KEEP_NAME:
                rendered.append(entities[0].type)
            elif entities and options.entities == EntitiesStrategy.KEEP_VALUE:
                rendered.append(str(entities[0].value))
            elif entities and options.entities == EntitiesStrategy.KEEP_DEFAULT:
                rendered.append(token.value)
            # ignore

        text = convert_to_real_spaces("".join(rendered))
        if options.lower_case:
            text = text.lower()
        return text

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return "Utterance(language_code={!r}, text={!r})".format(
            self._language_code, self.to_string()
        )

    ## Tagging #################################################################

    def tag_slot(
        self, slot: Union[ExtractedSlot, UtteranceSlot], start: int, end: int
    ):
        """Tag the tokens lying entirely in [start, end) with a slot.

        Nothing is tagged when no whole token lies in the range.

        Raises:
            InvalidRangeError
                When the range is malformed or exceeds the utterance text
        """
        aligned = align_range(self._tokens, start, end)
        if aligned is None:
            return

        start_token_idx, end_token_idx = aligned
        tagged = UtteranceSlot(
            start_token_idx=start_token_idx,
            end_token_idx=end_token_idx,
            start_pos=start,
            end_pos=end,
            name=slot.name,
            source=slot.source,
            value=slot.value,
            confidence=slot.confidence,
        )
        self._slots = self._slots + (tagged,)

    def tag_entity(
        self, entity: Union[ExtractedEntity, UtteranceEntity], start: int, end: int
    ):
        """Tag the tokens lying entirely in [start, end) with an entity.

        Nothing is tagged when no whole token lies in the range.

        Raises:
            InvalidRangeError
                When the range is malformed or exceeds the utterance text
        """
        aligned = align_range(self._tokens, start, end)
        if aligned is None:
            return

        start_token_idx, end_token_idx = aligned
        tagged = UtteranceEntity(
            start_token_idx=start_token_idx,
            end_token_idx=end_token_idx,
            start_pos=start,
            end_pos=end,
            type=entity.type,
            value=entity.value,
            confidence=entity.confidence,
            metadata=entity.metadata,
        )
        self._entities = self._entities + (tagged,)

    ## Cloning #################################################################

    def clone(self, copy_entities: bool, copy_slots: bool) -> "Utterance":
        """Build an independent copy of this utterance.

        The TF-IDF table is copied; the clustering model is not. Entities and
        slots are tagged again on the copy from their character positions.
        """
        utterance = Utterance(
            [token.value for token in self._tokens],
            [token.vector for token in self._tokens],
            [token.part_of_speech for token in self._tokens],
            self._language_code,
        )
        utterance.set_global_tfidf(self._global_tfidf or {})

        if copy_entities:
            for entity in self._entities:
                utterance.tag_entity(entity, entity.start_pos, entity.end_pos)

        if copy_slots:
            for slot in self._slots:
                utterance.tag_slot(slot, slot.start_pos, slot.end_pos)

        return utterance


_TEST_SPLIT_REGEX = re.compile(
    "({}|\\s)".format("|".join(re.escape(char) for char in SPECIAL_CHARSET))
)


def make_test_utterance(text: str) -> Utterance:
    """Build an utterance with a naive tokenizer splitting on spaces and
    special characters; vectors are one dimensional zeros and POS tags N/A.
    """
    tokens: List[str] = [token for token in _TEST_SPLIT_REGEX.split(text) if token]
    vectors = [[0.0] for _ in tokens]
    pos_tags = [PartOfSpeech.NA for _ in tokens]
    return Utterance(tokens, vectors, pos_tags, "en")
