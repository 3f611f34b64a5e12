"""Unit tests for ContactTrackingService."""

import json
from datetime import datetime, timezone

import pytest

from constantcontact.exceptions import DecodeError, InvalidArgumentError, ServiceException
from constantcontact.models import (
    BounceReport,
    CampaignTrackingSummary,
    ClickReport,
    OptOutReport,
    ResultSet,
    SendReport,
    TrackingSummary,
)
from constantcontact.services import ContactTrackingService, iter_pages

BASE_URL = "https://api.test.constantcontact.com"
CONTACT_PATH = "/v2/contacts/42/tracking"


def _result_set(results, next_link=None):
    pagination = {"next_link": next_link} if next_link else {}
    return json.dumps({"meta": {"pagination": pagination}, "results": results})


@pytest.fixture
def service(service_kwargs):
    return ContactTrackingService(**service_kwargs)


def test_get_activities_decodes_each_variant(service, transport):
    transport.queue(
        200,
        _result_set(
            [
                {"activity_type": "EMAIL_SEND", "contact_id": "42", "send_date": "2024-01-01T00:00:00.000Z"},
                {"activity_type": "EMAIL_BOUNCE", "contact_id": "42", "bounce_code": "B"},
                {"activity_type": "EMAIL_UNSUBSCRIBE", "unsubscribe_reason": "too many emails"},
            ],
            next_link="/v2/contacts/42/tracking?next=bmV4dA&limit=3",
        ),
    )

    result = service.get_activities("42", limit=3)

    assert transport.last_url == f"{BASE_URL}{CONTACT_PATH}?limit=3"
    assert isinstance(result, ResultSet)
    assert [type(r) for r in result.results] == [SendReport, BounceReport, OptOutReport]
    assert result.next == "bmV4dA"


def test_unknown_activity_type_is_decode_error(service, transport):
    transport.queue(200, _result_set([{"activity_type": "EMAIL_TELEPATHY"}]))
    with pytest.raises(ServiceException) as exc_info:
        service.get_activities("42")
    assert isinstance(exc_info.value.cause, DecodeError)


def test_created_since_precedes_limit(service, transport):
    transport.queue(200, _result_set([]))
    since = datetime(2024, 1, 1, tzinfo=timezone.utc)
    service.get_clicks("42", limit=50, created_since=since)

    assert transport.last_url == (
        f"{BASE_URL}{CONTACT_PATH}/clicks?created_since=2024-01-01T00%3A00%3A00.000Z&limit=50"
    )


def test_get_clicks_returns_click_reports(service, transport):
    transport.queue(200, _result_set([{"activity_type": "EMAIL_CLICK", "link_id": "3"}]))
    result = service.get_clicks("42")
    assert result.results == (ClickReport(link_id="3"),)


@pytest.mark.parametrize(
    "method, suffix",
    [
        ("get_bounces", "bounces"),
        ("get_forwards", "forwards"),
        ("get_opens", "opens"),
        ("get_sends", "sends"),
        ("get_unsubscribes", "unsubscribes"),
    ],
)
def test_report_families_hit_their_paths(service, transport, method, suffix):
    transport.queue(200, _result_set([]))
    getattr(service, method)("42", limit=5)
    assert transport.last_url == f"{BASE_URL}{CONTACT_PATH}/{suffix}?limit=5"


ALL_OPERATIONS = [
    lambda s, cid: s.get_summary(cid),
    lambda s, cid: s.get_summary_by_campaign(cid),
    lambda s, cid: s.get_activities(cid),
    lambda s, cid: s.get_bounces(cid),
    lambda s, cid: s.get_clicks(cid),
    lambda s, cid: s.get_forwards(cid),
    lambda s, cid: s.get_opens(cid),
    lambda s, cid: s.get_sends(cid),
    lambda s, cid: s.get_unsubscribes(cid),
]


@pytest.mark.parametrize("operation", ALL_OPERATIONS)
@pytest.mark.parametrize("contact_id", ["", None])
def test_empty_contact_id_is_rejected_everywhere(service, transport, operation, contact_id):
    with pytest.raises(InvalidArgumentError):
        operation(service, contact_id)
    assert transport.calls == []


def test_limit_is_validated(service, transport):
    with pytest.raises(InvalidArgumentError):
        service.get_bounces("42", limit=501)
    assert transport.calls == []


def test_get_summary(service, transport):
    transport.queue(200, json.dumps({"sends": 5, "opens": 2, "spam_count": 0}))
    summary = service.get_summary("42", created_since="2024-01-01")

    assert transport.last_url == (
        f"{BASE_URL}{CONTACT_PATH}/reports/summary?created_since=2024-01-01"
    )
    assert summary == TrackingSummary(sends=5, opens=2)


def test_get_summary_by_campaign(service, transport):
    transport.queue(
        200,
        json.dumps(
            [
                {"campaign_id": "1", "campaign_name": "Spring", "sends": 1, "opens": 1},
                {"campaign_id": "2", "campaign_name": "Summer", "sends": 1},
            ]
        ),
    )
    summaries = service.get_summary_by_campaign("42")

    assert transport.last_url == f"{BASE_URL}{CONTACT_PATH}/reports/summaryByCampaign"
    assert all(isinstance(s, CampaignTrackingSummary) for s in summaries)
    assert [s.campaign_name for s in summaries] == ["Spring", "Summer"]


def test_get_next_uses_link_verbatim(service, transport):
    link = "/v2/contacts/42/tracking/bounces?next=abc&limit=1"
    transport.queue(200, _result_set([{"activity_type": "EMAIL_BOUNCE"}]))

    result = service.get_next(link, BounceReport)

    assert transport.last_url == BASE_URL + link
    assert isinstance(result.results[0], BounceReport)


def test_get_next_defaults_to_mixed_activities(service, transport):
    transport.queue(200, _result_set([{"activity_type": "EMAIL_SEND"}]))
    result = service.get_next("/v2/contacts/42/tracking?next=abc")
    assert isinstance(result.results[0], SendReport)


def test_next_bounces_decodes_untagged_entries(service, transport):
    transport.queue(
        200,
        _result_set(
            [{"activity_type": "EMAIL_BOUNCE", "bounce_code": "B"}],
            next_link="/v2/contacts/42/tracking/bounces?next=cGFnZTI",
        ),
    )
    transport.queue(200, _result_set([{"contact_id": "42", "bounce_code": "Z"}]))

    pages = list(iter_pages(service.get_bounces("42"), service.next_bounces))

    assert len(pages) == 2
    assert transport.last_url == f"{BASE_URL}{CONTACT_PATH}/bounces?next=cGFnZTI"
    assert isinstance(pages[1].results[0], BounceReport)
    assert pages[1].results[0].bounce_code == "Z"


@pytest.mark.parametrize(
    "method, tag, report_type",
    [
        ("next_activities", "EMAIL_SEND", SendReport),
        ("next_clicks", "EMAIL_CLICK", ClickReport),
        ("next_sends", "EMAIL_SEND", SendReport),
        ("next_unsubscribes", "EMAIL_UNSUBSCRIBE", OptOutReport),
    ],
)
def test_next_methods_fix_the_report_type(service, transport, method, tag, report_type):
    transport.queue(200, _result_set([{"activity_type": tag}]))
    result = getattr(service, method)("/v2/contacts/42/tracking?next=abc")
    assert isinstance(result.results[0], report_type)


def test_get_next_rejects_link_to_other_host(service, transport):
    with pytest.raises(InvalidArgumentError):
        service.get_next("https://evil.example/v2/contacts/42/tracking?next=abc")
    assert transport.calls == []
