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

# Third Party
import pytest

# Local
from caikit_nlu.toolkit.vocab_utils import get_closest_token, get_max_edit_ops

## Setup #########################################################################

VOCAB = {
    "flight": [1.0, 0.0],
    "book": [0.0, 1.0],
    "the": [0.5, 0.5],
}

## Tests ########################################################################


@pytest.mark.parametrize(
    "token,expected",
    [("the", 0), ("book", 1), ("flight", 2), ("reservations", 3)],
)
def test_get_max_edit_ops(token, expected):
    assert get_max_edit_ops(token) == expected


def test_closest_token_typo():
    assert get_closest_token("flyght", [0.0, 0.0], VOCAB) == "flight"


def test_closest_token_short_tokens_need_exact_match():
    assert get_closest_token("teh", [0.0, 0.0], VOCAB) == ""


def test_closest_token_nothing_close():
    assert get_closest_token("reservation", [9.0, 9.0], VOCAB) == ""


def test_closest_token_spatial():
    # No typo candidate, closest vector wins
    assert get_closest_token("reservation", [0.1, 0.9], VOCAB, True) == "book"


def test_closest_token_edit_distance_takes_precedence():
    # "flyght" is 1 edit away from "flight"; vector distances are all > 1
    assert get_closest_token("flyght", [5.0, 5.0], VOCAB, True) == "flight"
