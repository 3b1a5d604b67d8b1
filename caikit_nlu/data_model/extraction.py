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
"""Payloads produced by external slot parsers and entity extractors. These are
attached to utterance ranges by Utterance.tag_slot / Utterance.tag_entity.
"""
# Standard
from typing import Optional

# First Party
from caikit.core import DataObjectBase
import caikit


@caikit.core.dataobject(package="caikit_data_model.caikit_nlu")
class ExtractedSlot(DataObjectBase):
    name: str
    source: str  # text the slot was extracted from
    value: str
    confidence: float


@caikit.core.dataobject(package="caikit_data_model.caikit_nlu")
class EntityMetadata(DataObjectBase):
    source: str
    entity_id: str
    extractor: str  # e.g. "system", "list", "pattern"
    unit: Optional[str]
    occurrence: Optional[str]


@caikit.core.dataobject(package="caikit_data_model.caikit_nlu")
class ExtractedEntity(DataObjectBase):
    type: str
    value: str
    confidence: float
    metadata: EntityMetadata
