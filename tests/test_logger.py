import json
import logging

from accubooks.core.logger import PLAIN_FORMAT, JsonFormatter, build_formatter


def _record(**extra):
    record = logging.makeLogRecord({"name": "accubooks.test", "levelname": "INFO", "msg": "Saved invoice %s", "args": (7,)})
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_payload():
    line = JsonFormatter(service="AccuBooks", env="test").format(_record(company_id=3))
    payload = json.loads(line)
    assert payload["message"] == "Saved invoice 7"
    assert payload["service"] == "AccuBooks"
    assert payload["env"] == "test"
    assert payload["logger"] == "accubooks.test"
    assert payload["extra"] == {"company_id": 3}


def test_json_formatter_omits_empty_extra():
    payload = json.loads(JsonFormatter(service="AccuBooks", env="test").format(_record()))
    assert "extra" not in payload


def test_build_formatter_by_name():
    assert isinstance(build_formatter("JSON"), JsonFormatter)
    assert build_formatter("plain")._fmt == PLAIN_FORMAT
