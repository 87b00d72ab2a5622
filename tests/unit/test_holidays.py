import io

import pytest

from keyed_di.holidays import (
    HolidayService,
    HolidaysProvider,
    JapanHolidaysProvider,
    USHolidaysProvider,
)


def test_providers_return_fixed_names():
    assert JapanHolidaysProvider().describe() == "天皇誕生日"
    assert USHolidaysProvider().describe() == "Independence Day"


def test_capability_is_abstract():
    with pytest.raises(TypeError):
        HolidaysProvider()


def test_announce_writes_line(capsys):
    service = HolidayService(USHolidaysProvider())
    assert service.announce() == "Holiday: Independence Day"
    assert capsys.readouterr().out == "Holiday: Independence Day\n"


def test_announce_to_stream():
    buf = io.StringIO()
    provider = JapanHolidaysProvider()
    service = HolidayService(provider)
    service.announce(buf)
    assert buf.getvalue() == "Holiday: 天皇誕生日\n"
    assert service.provider is provider
