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
"""Errors raised to callers handing malformed input to the utterance core"""


class DimensionMismatchError(ValueError):
    """Tokens, vectors and POS tags handed to an Utterance are not aligned"""


class InvalidRangeError(ValueError):
    """A character range is malformed or falls outside the utterance text"""
