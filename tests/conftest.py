# -*- coding: Utf-8 -*-

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any

import pytest

if TYPE_CHECKING:
    from unittest.mock import MagicMock

    from pytest_mock import MockerFixture


################################## Environment initialization ##################################
# Always use the default configuration
os.environ.pop("AUTOVIV_MAX_RESOLUTION_DEPTH", None)


################################## fixtures ##################################


@pytest.fixture
def sentinel(mocker: MockerFixture) -> Any:
    return mocker.sentinel


@pytest.fixture
def empty_list_resolver_stub(mocker: MockerFixture) -> MagicMock:
    def side_effect(mapping: Any, key: Any) -> None:
        mapping[key] = []

    return mocker.MagicMock(name="empty list resolver stub", side_effect=side_effect)
