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
"""Helpful fixtures for configuring individual unit tests.
"""
# Standard
from contextlib import contextmanager
from typing import List
from unittest import mock
import json
import re

# First Party
from caikit.config.config import merge_configs
import aconfig
import caikit

# Local
from caikit_nlu.toolkit.token_utils import SPECIAL_CHARSET, is_space, is_word
from caikit_nlu.utterance import ClusteringModel, UtteranceTools

_SPLIT_REGEX = re.compile(
    "({}|\\s)".format("|".join(re.escape(char) for char in SPECIAL_CHARSET))
)


class FakeTools(UtteranceTools):
    """Whitespace / punctuation tokenizer with toy tags and vectors. Every call
    is recorded so tests can check how the tools were used.

    Word vectors are [len(token), number of vowels, 1], spaces get a null
    vector and punctuation [0, 0, 1].
    """

    def __init__(self, strip_tokens: bool = False):
        self.strip_tokens = strip_tokens
        self.tokenize_calls = []
        self.pos_calls = []
        self.vectorize_calls = []

    def tokenize_utterances(self, utterances, language, vocab=None):
        self.tokenize_calls.append((list(utterances), language, vocab))
        tokenized = []
        for utterance in utterances:
            if self.strip_tokens:
                utterance = utterance.strip()
            tokenized.append([tok for tok in _SPLIT_REGEX.split(utterance) if tok])
        return tokenized

    def part_of_speech_utterances(self, tokens, language):
        self.pos_calls.append((tokens, language))
        return [[self._tag(token) for token in utterance] for utterance in tokens]

    def vectorize_tokens(self, tokens, language):
        self.vectorize_calls.append((list(tokens), language))
        return [self._vectorize(token) for token in tokens]

    @staticmethod
    def _tag(token: str) -> str:
        if is_space(token):
            return "N/A"
        return "NOUN" if is_word(token) else "PUNCT"

    @staticmethod
    def _vectorize(token: str) -> List[float]:
        if is_space(token):
            return [0.0, 0.0, 0.0]
        if not is_word(token):
            return [0.0, 0.0, 1.0]
        vowels = sum(char in "aeiou" for char in token.lower())
        return [float(len(token)), float(vowels), 1.0]


class FakeKMeans(ClusteringModel):
    """Clustering model answering a fixed cluster id"""

    def __init__(self, cluster: int):
        self.cluster = cluster
        self.calls = []

    def nearest(self, vectors):
        self.calls.append(vectors)
        return [self.cluster for _ in vectors]


@contextmanager
def temp_config(**overrides):
    local_config = aconfig.Config(
        json.loads(json.dumps(caikit.config.get_config())),
        override_env_vars=False,
    )
    merge_configs(local_config, overrides)

    with mock.patch.object(caikit.config.config, "_IMMUTABLE_CONFIG", local_config):
        yield local_config
