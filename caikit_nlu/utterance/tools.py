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
"""Interfaces of the external collaborators used to build utterances. The
utterance core only calls these; tokenizers, taggers, embedders and
clustering models live outside of it.
"""
# Standard
from abc import ABC, abstractmethod
from typing import List, Mapping, Optional, Sequence


class UtteranceTools(ABC):
    """Language tools needed to build utterances from raw strings. All methods
    are batched and must return one result per input, in input order.
    """

    @abstractmethod
    def tokenize_utterances(
        self,
        utterances: List[str],
        language: str,
        vocab: Optional[Mapping[str, Sequence[float]]] = None,
    ) -> List[List[str]]:
        """Split every utterance into token strings"""

    @abstractmethod
    def part_of_speech_utterances(
        self, tokens: List[List[str]], language: str
    ) -> List[List[str]]:
        """Tag every token of every tokenized utterance"""

    @abstractmethod
    def vectorize_tokens(
        self, tokens: List[str], language: str
    ) -> List[Sequence[float]]:
        """Embed every token string"""


class ClusteringModel(ABC):
    """A trained clustering model (e.g. k-means over token vectors)"""

    @abstractmethod
    def nearest(self, vectors: List[Sequence[float]]) -> List[int]:
        """Return the id of the nearest cluster for each vector"""
