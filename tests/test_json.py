import json
from datetime import UTC, datetime

import pytest
from honeybadger_api import BacktraceEntry, CheckInParams, DashboardParams
from honeybadger_api.json_utils import json_dumps, pydantic_encoder


def test_sorted_compact() -> None:
    assert json_dumps({"b": 1, "a": [1, 2]}) == '{"a":[1,2],"b":1}'


def test_not_compact() -> None:
    assert json_dumps({"a": 1}, compact=False) == '{"a": 1}'


def test_model_dumped_without_none() -> None:
    params = CheckInParams(name="Daily Backup", schedule_type="simple")
    assert json.loads(json_dumps({"check_in": params})) == {
        "check_in": {"name": "Daily Backup", "schedule_type": "simple"}
    }


def test_dashboard_params_keep_empty_widgets() -> None:
    """Test widgets are always sent, default_ts only when set."""
    assert json.loads(json_dumps(DashboardParams(title="Errors"))) == {
        "title": "Errors",
        "widgets": [],
    }


def test_encoder_dumps_models_by_alias() -> None:
    entry = BacktraceEntry.model_validate({"number": 3, "class": "Worker"})
    encoded = pydantic_encoder(entry)
    assert encoded["class"] == "Worker"
    assert "column" not in encoded


@pytest.mark.parametrize(
    "value",
    [
        pytest.param(datetime(2024, 1, 2, tzinfo=UTC), id="datetime"),
        pytest.param({1, 2}, id="set"),
    ],
)
def test_encoder_rejects_non_model(value: object) -> None:
    """Test only pydantic models are encoded beyond plain JSON types."""
    with pytest.raises(TypeError, match="is not JSON serializable"):
        pydantic_encoder(value)


def test_encoder_rejects_unknown() -> None:
    with pytest.raises(TypeError, match="is not JSON serializable"):
        json_dumps({"value": object()})
