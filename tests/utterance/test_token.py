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
"""Tests for utterance tokens
"""
# Third Party
import numpy as np
import pytest

# Local
from caikit_nlu.data_model import PartOfSpeech
from caikit_nlu.toolkit.token_utils import SPACE
from caikit_nlu.utterance import TokenToStringOptions, Utterance
from tests.fixtures import FakeKMeans

## Setup #########################################################################

TOKENS = ["Hello", SPACE + "big", " ", "world", "!"]
VECTORS = [[1.0, 0.0], [0.0, 1.0], [0.0, 0.0], [1.0, 1.0], [0.5, 0.5]]
POS_TAGS = ["INTJ", "ADJ", "N/A", "NOUN", "PUNCT"]


def build_utterance():
    return Utterance(TOKENS, VECTORS, POS_TAGS, "en")


## Tests ########################################################################


def test_token_positions():
    tokens = build_utterance().tokens
    assert [token.index for token in tokens] == [0, 1, 2, 3, 4]
    assert [token.offset for token in tokens] == [0, 5, 9, 10, 15]
    for token in tokens:
        preceding = tokens[: token.index]
        assert token.offset == sum(len(tok.value) for tok in preceding)


def test_token_flags():
    tokens = build_utterance().tokens
    assert [token.is_bos for token in tokens] == [True, False, False, False, False]
    assert [token.is_eos for token in tokens] == [False, False, False, False, True]
    assert [token.is_word for token in tokens] == [True, False, False, True, False]
    assert [token.is_space for token in tokens] == [False, False, True, False, False]


def test_token_vector_and_pos():
    token = build_utterance().tokens[3]
    assert isinstance(token.vector, np.ndarray)
    np.testing.assert_array_equal(token.vector, [1.0, 1.0])
    assert token.part_of_speech is PartOfSpeech.NOUN


def test_token_vector_is_read_only():
    token = build_utterance().tokens[0]
    with pytest.raises(ValueError):
        token.vector[0] = 42.0


def test_token_vector_is_a_copy():
    vectors = [np.array(vector) for vector in VECTORS]
    utterance = Utterance(TOKENS, vectors, POS_TAGS, "en")
    vectors[0][0] = 42.0
    assert utterance.tokens[0].vector[0] == 1.0


def test_token_to_string_defaults():
    token = build_utterance().tokens[1]
    assert token.to_string() == " big"
    assert str(token) == " big"


def test_token_to_string_options():
    token = build_utterance().tokens[0]
    assert token.to_string(TokenToStringOptions(lower_case=True)) == "hello"

    spaced = build_utterance().tokens[1]
    assert spaced.to_string(TokenToStringOptions(real_spaces=False)) == SPACE + "big"
    assert spaced.to_string(TokenToStringOptions(trim=True)) == "big"
    # Placeholders are not whitespace, they are only trimmed once converted
    assert (
        spaced.to_string(TokenToStringOptions(real_spaces=False, trim=True))
        == SPACE + "big"
    )


def test_token_tfidf_reads_owner_state():
    utterance = build_utterance()
    token = utterance.tokens[0]
    assert token.tfidf == 1

    utterance.set_global_tfidf({"Hello": 0.25})
    assert token.tfidf == 0.25
    assert utterance.tokens[3].tfidf == 1


def test_token_cluster_reads_owner_state():
    utterance = build_utterance()
    token = utterance.tokens[0]
    assert token.cluster == 1

    kmeans = FakeKMeans(cluster=7)
    utterance.set_kmeans(kmeans)
    assert token.cluster == 7
    np.testing.assert_array_equal(kmeans.calls[0][0], token.vector)

    utterance.set_kmeans(None)
    assert token.cluster == 1
