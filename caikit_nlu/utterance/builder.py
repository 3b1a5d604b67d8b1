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
"""Build utterances in batch from raw strings using external language tools
"""
# Standard
from typing import Dict, List, Mapping, Optional, Sequence

# First Party
from caikit.core.exceptions import error_handler
import alog

# Local
from ..data_model import ExtractedSlot
from ..toolkit.string_utils import replace_consecutive_spaces
from ..toolkit.utterance_parser import parse_utterance
from .tools import UtteranceTools
from .utterance import Utterance

log = alog.use_channel("UTT_BUILD")
error = error_handler.get(log)


def build_utterance_batch(
    raw_utterances: Sequence[str],
    language: str,
    tools: UtteranceTools,
    vocab: Optional[Mapping[str, Sequence[float]]] = None,
) -> List[Utterance]:
    """Tokenize, tag and vectorize raw utterances and build Utterances out of
    them. Inline "[value](slot)" annotations are stripped from the text and
    tagged as slots on the resulting utterances.

    Inputs that tokenize to no token at all are dropped, so the result may be
    shorter than the input; the order of the remaining inputs is kept.

    Args:
        raw_utterances: Sequence[str]
            Utterances as typed by users or authors
        language: str
            Language code of the utterances
        tools: UtteranceTools
            Tokenizer, POS tagger and vectorizer
        vocab: Optional[Mapping[str, Sequence[float]]]
            Known vocabulary, handed to the tokenizer

    Returns:
        List[Utterance]
            One utterance per input that produced tokens
    """
    error.type_check("<NLU14458362E>", str, language=language)
    error.type_check("<NLU80026713E>", UtteranceTools, tools=tools)

    parsed = [
        parse_utterance(replace_consecutive_spaces(raw)) for raw in raw_utterances
    ]
    token_utterances = tools.tokenize_utterances(
        [p.utterance for p in parsed], language, vocab
    )
    pos_utterances = tools.part_of_speech_utterances(token_utterances, language)

    # Vectorize each distinct token once for the whole batch
    unique_tokens = list(
        dict.fromkeys(token for tokens in token_utterances for token in tokens)
    )
    vectors = tools.vectorize_tokens(unique_tokens, language)
    vector_map: Dict[str, Sequence[float]] = dict(zip(unique_tokens, vectors))

    utterances = []
    for tokens, pos_tags, parsed_utterance in zip(
        token_utterances, pos_utterances, parsed
    ):
        if not tokens:
            log.debug2(
                "Dropping utterance with no token: [%s]", parsed_utterance.utterance
            )
            continue

        utterance = Utterance(
            tokens, [vector_map[token] for token in tokens], pos_tags, language
        )

        # Tokenizers may not reproduce the parsed text exactly, e.g. with a
        # trailing space inside a slot at the end of the utterance
        # "my name is [Sylvain ](any)". Slots would be misaligned then.
        if len(utterance.to_string()) == len(parsed_utterance.utterance):
            for parsed_slot in parsed_utterance.parsed_slots:
                utterance.tag_slot(
                    ExtractedSlot(
                        name=parsed_slot.name,
                        source=parsed_slot.value,
                        value=parsed_slot.value,
                        confidence=1.0,
                    ),
                    parsed_slot.clean_position.start,
                    parsed_slot.clean_position.end,
                )
        elif parsed_utterance.parsed_slots:
            log.info(
                "<NLU52139071I>",
                "Tokens of [{}] do not match its text, skipping {} slot(s)".format(
                    parsed_utterance.utterance, len(parsed_utterance.parsed_slots)
                ),
            )

        utterances.append(utterance)

    log.debug(
        "<NLU37745092D>",
        "Built {} utterance(s) out of {}".format(len(utterances), len(parsed)),
    )
    return utterances
