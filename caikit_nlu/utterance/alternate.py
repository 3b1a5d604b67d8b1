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
"""Alternate utterances where out-of-vocabulary words are replaced by their
closest in-vocabulary neighbour.
"""
# Standard
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, Sequence, Union

# Third Party
import numpy as np

# First Party
from caikit import get_config
import alog

# Local
from ..data_model import PartOfSpeech
from ..toolkit.token_utils import is_word
from ..toolkit.vocab_utils import get_closest_token
from .token import TokenToStringOptions, UtteranceToken
from .utterance import Utterance

log = alog.use_channel("UTT_ALTER")

VectorType = Union[Sequence[float], np.ndarray]
ClosestTokenFn = Callable[[str, VectorType, Mapping[str, VectorType], bool], str]

_LOWER_CASE = TokenToStringOptions(lower_case=True)


@dataclass
class _AlternateToken:
    value: str
    vector: VectorType
    part_of_speech: PartOfSpeech
    is_alter: bool = False

    @classmethod
    def from_token(cls, token: UtteranceToken) -> "_AlternateToken":
        return cls(
            value=token.to_string(),
            vector=token.vector,
            part_of_speech=token.part_of_speech,
        )


def _is_closest_token_valid(original: UtteranceToken, closest_token: str) -> bool:
    min_length = get_config().utterance.oov_min_token_length
    return (
        is_word(closest_token)
        and len(original.value) > min_length
        and len(closest_token) > min_length
    )


def get_alternate_utterance(
    utterance: Utterance,
    vocab_vectors: Mapping[str, VectorType],
    closest_token_fn: ClosestTokenFn = get_closest_token,
) -> Optional[Utterance]:
    """Build a slightly different version of an utterance, replacing
    out-of-vocabulary words with their closest in-vocabulary neighbour.

    Non words, words already in the vocabulary and words tagged as entities
    are kept as they are. Short words and candidates are never substituted.

    Args:
        utterance: Utterance
            The original utterance
        vocab_vectors: Mapping[str, VectorType]
            Vocabulary of the model, token to vector
        closest_token_fn: ClosestTokenFn
            Nearest vocabulary token lookup

    Returns:
        Optional[Utterance]
            The alternate utterance, or None when no token was substituted
    """
    alternate_tokens = []
    for token in utterance.tokens:
        token_str = token.to_string(_LOWER_CASE)
        if not token.is_word or token_str in vocab_vectors or token.entities:
            alternate_tokens.append(_AlternateToken.from_token(token))
            continue

        closest_token = closest_token_fn(token_str, token.vector, vocab_vectors, False)
        if _is_closest_token_valid(token, closest_token):
            alternate_tokens.append(
                _AlternateToken(
                    value=closest_token,
                    vector=vocab_vectors[closest_token],
                    part_of_speech=token.part_of_speech,
                    is_alter=True,
                )
            )
        else:
            alternate_tokens.append(_AlternateToken.from_token(token))

    if not any(token.is_alter for token in alternate_tokens):
        return None

    log.debug3(
        "Alternate utterance for [%s] replaces %d token(s)",
        utterance,
        sum(token.is_alter for token in alternate_tokens),
    )
    return Utterance(
        [token.value for token in alternate_tokens],
        [token.vector for token in alternate_tokens],
        [token.part_of_speech for token in alternate_tokens],
        utterance.language_code,
    )
