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
"""Utterance modeling: tokens, tagged ranges, batch building and OOV
substitution
"""
# Local
from .alternate import get_alternate_utterance
from .builder import build_utterance_batch
from .exceptions import DimensionMismatchError, InvalidRangeError
from .ranges import UtteranceEntity, UtteranceRange, UtteranceSlot
from .token import TokenToStringOptions, UtteranceToken
from .tools import ClusteringModel, UtteranceTools
from .utterance import (
    EntitiesStrategy,
    SlotsStrategy,
    Utterance,
    UtteranceToStringOptions,
    make_test_utterance,
)

__all__ = [
    "ClusteringModel",
    "DimensionMismatchError",
    "EntitiesStrategy",
    "InvalidRangeError",
    "SlotsStrategy",
    "TokenToStringOptions",
    "Utterance",
    "UtteranceEntity",
    "UtteranceRange",
    "UtteranceSlot",
    "UtteranceToStringOptions",
    "UtteranceToken",
    "UtteranceTools",
    "build_utterance_batch",
    "get_alternate_utterance",
    "make_test_utterance",
]
