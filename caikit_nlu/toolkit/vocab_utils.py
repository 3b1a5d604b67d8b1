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
"""Nearest in-vocabulary token lookup used to substitute out-of-vocabulary
tokens.
"""
# Standard
from typing import Mapping, Sequence, Union

# Third Party
from rapidfuzz.distance import Levenshtein
import numpy as np

# First Party
from caikit.core.exceptions import error_handler
import alog

log = alog.use_channel("VOCAB_UTIL")
error = error_handler.get(log)

VectorType = Union[Sequence[float], np.ndarray]


def get_max_edit_ops(vocab_token: str) -> int:
    """Number of edit operations tolerated to consider vocab_token a typo
    correction; short tokens must match exactly.
    """
    length = len(vocab_token)
    if length <= 3:
        return 0
    if length <= 4:
        return 1
    if length < 10:
        return 2
    return 3


def get_closest_token(
    token: str,
    vector: VectorType,
    vocab: Mapping[str, VectorType],
    use_spatial: bool = False,
) -> str:
    """Find the vocabulary token closest to an out-of-vocabulary token.

    Edit distance is used for typo detection. When use_spatial is set, the
    euclidean distance between vectors is also considered for close-meaning
    detection; a vector distance only wins when it is strictly smaller so
    letter distance takes precedence.

    Args:
        token: str
            The out-of-vocabulary token string
        vector: VectorType
            Embedding of the token
        vocab: Mapping[str, VectorType]
            Vocabulary token to vector table
        use_spatial: bool
            Also consider vector distance

    Returns:
        str
            The closest vocabulary token, or an empty string when no
            vocabulary token is close enough
    """
    error.type_check("<NLU27705184E>", str, token=token)

    closest_token = ""
    distance = float("inf")
    token_vector = np.asarray(vector, dtype=np.float64)
    for vocab_token, vocab_vector in vocab.items():
        edit_distance = Levenshtein.distance(token, vocab_token)
        if edit_distance <= get_max_edit_ops(vocab_token) and edit_distance < distance:
            distance = edit_distance
            closest_token = vocab_token

        if use_spatial:
            vocab_array = np.asarray(vocab_vector, dtype=np.float64)
            spatial_distance = float(np.linalg.norm(token_vector - vocab_array))
            if spatial_distance < distance:
                distance = spatial_distance
                closest_token = vocab_token

    log.debug3("Closest vocabulary token for [%s] is [%s]", token, closest_token)
    return closest_token
