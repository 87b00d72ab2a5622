import io
import os
import subprocess
import sys
from pathlib import Path

import pytest
import structlog

from keyed_di.di import ServiceRegistry
from keyed_di.exceptions import MissingBindingError
from keyed_di.holidays import HolidayService, HolidaysProvider, USHolidaysProvider
from keyed_di import main as demo

EXPECTED = (
    "Default Provider: 天皇誕生日\n"
    "Japan Provider: 天皇誕生日\n"
    "US Provider: Independence Day\n"
    "Holiday: Independence Day\n"
)


def test_build_registry_wiring():
    registry = demo.build_registry()
    assert registry.sealed
    assert registry.resolve(HolidaysProvider).describe() == "天皇誕生日"
    assert registry.resolve_keyed(HolidaysProvider, "JP").describe() == "天皇誕生日"
    assert registry.resolve_keyed(HolidaysProvider, "US").describe() == "Independence Day"

    service = registry.resolve(HolidayService)
    assert isinstance(service.provider, USHolidaysProvider)
    assert service.provider is registry.resolve_keyed(HolidaysProvider, "US")
    assert registry.resolve(HolidayService) is service


def test_unregistered_key_raises():
    registry = demo.build_registry()
    with pytest.raises(MissingBindingError):
        registry.resolve_keyed(HolidaysProvider, "FR")


def test_build_registry_under_error_policy(strict_settings):
    registry = demo.build_registry(strict_settings)
    assert registry.keys(HolidaysProvider) == ["JP", "US"]


def test_run_output_order():
    buf = io.StringIO()
    demo.run(demo.build_registry(), buf)
    assert buf.getvalue() == EXPECTED


def test_main_prints_to_stdout(capsys):
    assert demo.main() == 0
    assert capsys.readouterr().out == EXPECTED


def test_main_propagates_missing_binding(monkeypatch, capsys):
    def partial_registry(settings=None):
        registry = ServiceRegistry()
        registry.register_keyed(HolidaysProvider, "US", USHolidaysProvider())
        return registry

    monkeypatch.setattr(demo, "build_registry", partial_registry)
    with pytest.raises(MissingBindingError) as exc:
        demo.main()
    assert exc.value.key is None
    assert capsys.readouterr().out == ""
    assert structlog.contextvars.get_contextvars() == {}


def test_module_entry_point_exits_cleanly():
    src = Path(__file__).resolve().parents[2] / "src"
    env = dict(os.environ, PYTHONIOENCODING="utf-8")
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(src), env.get("PYTHONPATH")]))
    result = subprocess.run(
        [sys.executable, "-m", "keyed_di"],
        capture_output=True,
        env=env,
        timeout=60,
    )
    assert result.returncode == 0, result.stderr.decode("utf-8", "replace")
    assert result.stdout.decode("utf-8").replace("\r\n", "\n") == EXPECTED

