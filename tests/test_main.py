import json

import pytest

from resource_search.main import build_report, main


def test_build_report() -> None:
    report = build_report("/acme/starred?q=auth&ref=hn", "r1")
    assert report["options"]["owner"] == "acme"
    assert report["options"]["list"] == "starred"
    assert report["title"] == "Search Result"
    assert report["url"] == "/acme/starred?q=auth&sort=new&resourceId=r1"
    assert report["action"] == "/acme/starred?resourceId=r1"
    assert report["search"] == "q=auth"
    assert report["redirect"] == "/discover?q=auth"


def test_main_prints_json(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["/resources", "--log-level", "WARNING"])
    assert exc.value.code == 0

    report = json.loads(capsys.readouterr().out)
    assert report["title"] == "Discover"
    assert report["url"] == "/resources?sort=new"
    assert report["options"]["integrations"] == []


def test_main_requires_url() -> None:
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2


def test_build_report_ignores_query_in_fragment() -> None:
    report = build_report("/resources#x?q=a")
    assert report["search"] == ""
    assert report["redirect"] == "/discover"
    assert report["options"]["keyword"] is None
