from __future__ import annotations

import pytest

from apidocs.context import build_context
from apidocs.validators import config_errors, validate_config


def test_valid_config_is_returned_as_dict() -> None:
    config = {"groupName": "public", "paths": {"ant": "/pets/**"}}

    data = validate_config(config)

    assert data == config
    assert data is not config
    assert config_errors(config) == []


def test_errors_are_qualified_by_location_and_sorted() -> None:
    errors = config_errors({"positionPolicy": "last", "host": 3})

    assert len(errors) == 2
    assert errors[0].startswith("$.host: ")
    assert errors[1].startswith("$.positionPolicy: ")


def test_nested_errors_point_into_arrays() -> None:
    errors = config_errors({"protocols": ["https", "gopher"]})

    assert len(errors) == 1
    assert errors[0].startswith("$.protocols[1]: ")


def test_build_context_reports_the_offending_field() -> None:
    with pytest.raises(ValueError, match=r"\$\.groupName: "):
        build_context({"groupName": ""})
