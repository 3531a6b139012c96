"""
    Copyright 2026 Inmanta

    Licensed under the Apache License, Version 2.0 (the "License");
    you may not use this file except in compliance with the License.
    You may obtain a copy of the License at

        http://www.apache.org/licenses/LICENSE-2.0

    Unless required by applicable law or agreed to in writing, software
    distributed under the License is distributed on an "AS IS" BASIS,
    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
    See the License for the specific language governing permissions and
    limitations under the License.

    Contact: code@inmanta.com
"""

import pytest

from webidl.config import Config


@pytest.fixture(autouse=True)
def reset_config():
    """Every test starts from the default configuration, without config files from the working directory."""
    Config._reset()
    Config.load_config(main_cfg_file="/dev/null")
    yield
    Config._reset()
