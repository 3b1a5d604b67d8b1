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
"""Setup to be able to build a wheel for this extension module.
"""

import os
import setuptools

PROJECT_ROOT_DIR = os.path.dirname(os.path.abspath(__file__))
EXTENSION_NAME = "caikit_nlu"
CONFIG_PATH = os.path.join(PROJECT_ROOT_DIR, EXTENSION_NAME, "config", "config.yml")

# Release builds pass the version in; local builds fall back to the package version
lib_version = os.getenv("COMPONENT_VERSION", "0.1.0")


# read requirements from file
with open(os.path.join(PROJECT_ROOT_DIR, "requirements.txt")) as filehandle:
    requirements = list(map(str.strip, filehandle.read().splitlines()))
    # Remove --extra index line and comments, as they're not parsable by setup
    requirements = [
        name
        for name in requirements
        if name
        and not (
            name.startswith("--extra-index-url")
            or name.startswith("git")
            or name.startswith("#")
        )
    ]

if __name__ == "__main__":

    setuptools.setup(
        name=EXTENSION_NAME.replace("_", "-"),
        author="caikit",
        version=lib_version,
        license="Apache-2.0",
        description="Utterance modeling core for NLU pipelines",
        install_requires=requirements,
        extras_require={"dev-test": ["pytest>=7.4.0,<9"]},
        packages=setuptools.find_packages(include=("{}*".format(EXTENSION_NAME),)),
        package_data={EXTENSION_NAME: ["config/config.yml"]},
        include_package_data=True,
        python_requires=">=3.8",
    )
