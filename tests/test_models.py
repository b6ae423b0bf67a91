"""Tests for models.py — validated command input contracts."""

import json

import pytest

from inngest_ctl.exceptions import CliError
from inngest_ctl.models import CancelSpec, GlobalFlags, ListEventsSpec, SendEventSpec


class TestGlobalFlags:
    def test_defaults(self):
        flags = GlobalFlags()
        assert flags.pretty is False
        assert flags.output is None
        assert flags.dev is False
        assert flags.port is None
        assert flags.verbose is False


class TestSendEventSpec:
    def test_inline_data(self):
        spec = SendEventSpec.from_flags({"name": "user.signup", "data": '{"userId": "123"}'})
        assert spec.name == "user.signup"
        assert spec.data == {"userId": "123"}
        assert spec.id is None
        assert spec.env is None

    def test_optional_fields(self):
        spec = SendEventSpec.from_flags({"name": "a", "data": "{}", "id": "d1", "env": "br"})
        assert spec.id == "d1"
        assert spec.env == "br"

    def test_non_object_json_allowed(self):
        assert SendEventSpec.from_flags({"name": "a", "data": "[1, 2]"}).data == [1, 2]

    def test_data_file(self, tmp_path):
        path = tmp_path / "event.json"
        path.write_text(json.dumps({"orderId": 7}), encoding="utf-8")
        spec = SendEventSpec.from_flags({"name": "a", "data-file": str(path)})
        assert spec.data == {"orderId": 7}

    def test_data_file_wins_over_inline(self, tmp_path):
        path = tmp_path / "event.json"
        path.write_text('{"from": "file"}', encoding="utf-8")
        flags = {"name": "a", "data": '{"from": "flag"}', "data-file": str(path)}
        spec = SendEventSpec.from_flags(flags)
        assert spec.data == {"from": "file"}

    def test_name_required(self):
        with pytest.raises(CliError, match="--name is required"):
            SendEventSpec.from_flags({"data": "{}"})

    def test_data_required(self):
        with pytest.raises(CliError, match="--data or --data-file is required"):
            SendEventSpec.from_flags({"name": "a"})

    def test_invalid_inline_json(self):
        with pytest.raises(CliError, match="--data must be valid JSON"):
            SendEventSpec.from_flags({"name": "a", "data": "{bad"})

    def test_invalid_file_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("not json", encoding="utf-8")
        with pytest.raises(CliError, match=r"--data-file \(.*bad.json\) must be valid JSON"):
            SendEventSpec.from_flags({"name": "a", "data-file": str(path)})

    def test_missing_file(self, tmp_path):
        with pytest.raises(CliError, match="must be valid JSON"):
            SendEventSpec.from_flags({"name": "a", "data-file": str(tmp_path / "nope.json")})


class TestListEventsSpec:
    def test_empty(self):
        spec = ListEventsSpec.from_flags({})
        assert spec.name is None
        assert spec.limit is None

    def test_limit_parsed(self):
        assert ListEventsSpec.from_flags({"limit": "25", "name": "a"}).limit == 25

    @pytest.mark.parametrize("limit", ["0", "-3", "ten", "1.5"])
    def test_bad_limit(self, limit):
        with pytest.raises(CliError, match="--limit must be a positive integer"):
            ListEventsSpec.from_flags({"limit": limit})


class TestCancelSpec:
    _FLAGS = {
        "app": "my-app",
        "function": "my-func",
        "started-after": "1h",
        "started-before": "now",
    }

    def test_all_required_present(self):
        spec = CancelSpec.from_flags(dict(self._FLAGS, **{"if": "event.data.x == 1"}))
        assert spec.app_id == "my-app"
        assert spec.function_id == "my-func"
        assert spec.started_after == "1h"
        assert spec.started_before == "now"
        assert spec.if_expr == "event.data.x == 1"

    @pytest.mark.parametrize("missing", ["app", "function", "started-after", "started-before"])
    def test_each_required(self, missing):
        flags = {k: v for k, v in self._FLAGS.items() if k != missing}
        with pytest.raises(CliError, match=f"--{missing} is required"):
            CancelSpec.from_flags(flags)
