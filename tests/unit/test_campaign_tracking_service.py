"""Unit tests for CampaignTrackingService."""

import json

import pytest

from constantcontact.exceptions import (
    ApiError,
    DecodeError,
    InvalidArgumentError,
    ServiceException,
    TransportError,
)
from constantcontact.models import BounceReport, ClickReport, OpenReport, Paged, TrackingSummary
from constantcontact.services import CampaignTrackingService, iter_pages

BASE_URL = "https://api.test.constantcontact.com"

CAMPAIGN_PATH = "/v2/emailmarketing/campaigns/1100394165290/tracking"


def _page(results, next_link=None):
    pagination = {"next_link": next_link} if next_link else {}
    return json.dumps({"meta": {"pagination": pagination}, "results": results})


@pytest.fixture
def service(service_kwargs):
    return CampaignTrackingService(**service_kwargs)


def test_get_opens_builds_url_and_decodes_page(service, transport):
    transport.queue(
        200,
        _page(
            [
                {
                    "activity_type": "EMAIL_OPEN",
                    "campaign_id": "1100394165290",
                    "contact_id": "42",
                    "email_address": "ada@example.com",
                    "open_date": "2024-02-01T10:00:00.000Z",
                }
            ],
            next_link="/page2",
        ),
    )

    page = service.get_opens("1100394165290", created_since="2024-01-01", limit=25)

    assert transport.calls[0]["method"] == "GET"
    assert transport.last_url == (
        f"{BASE_URL}{CAMPAIGN_PATH}/opens?created_since=2024-01-01&limit=25"
    )
    assert isinstance(page, Paged)
    assert isinstance(page.results[0], OpenReport)
    assert page.results[0].email_address == "ada@example.com"
    assert page.next_link == "/page2"


def test_next_link_is_requested_verbatim(service, transport):
    transport.queue(200, _page([]))
    service.next_opens("/page2")
    assert transport.last_url == BASE_URL + "/page2"


def test_next_bounces_returns_second_page(service, transport):
    transport.queue(200, _page([{"activity_type": "EMAIL_BOUNCE", "bounce_code": "B"}], "/page2"))
    transport.queue(200, _page([{"activity_type": "EMAIL_BOUNCE", "bounce_code": "Z"}]))

    first = service.get_bounces("1100394165290")
    second = service.next_bounces(first.next_link)

    assert transport.last_url == BASE_URL + "/page2"
    assert second.results == (BounceReport(bounce_code="Z"),)
    assert second.next_link is None


def test_get_clicks_by_link(service, transport):
    transport.queue(200, _page([{"activity_type": "EMAIL_CLICK", "link_id": "7"}]))
    page = service.get_clicks("1100394165290", link_id="7")

    assert transport.last_url == f"{BASE_URL}{CAMPAIGN_PATH}/clicks/7"
    assert page.results == (ClickReport(link_id="7"),)


def test_get_clicks_all_links(service, transport):
    transport.queue(200, _page([]))
    service.get_clicks("1100394165290", limit=10)
    assert transport.last_url == f"{BASE_URL}{CAMPAIGN_PATH}/clicks?limit=10"


@pytest.mark.parametrize(
    "method, suffix",
    [
        ("get_bounces", "bounces"),
        ("get_forwards", "forwards"),
        ("get_sends", "sends"),
        ("get_opt_outs", "unsubscribes"),
    ],
)
def test_report_families_hit_their_paths(service, transport, method, suffix):
    transport.queue(200, _page([]))
    getattr(service, method)("1100394165290")
    assert transport.last_url == f"{BASE_URL}{CAMPAIGN_PATH}/{suffix}"


def test_structured_404_raises_service_exception(service, transport):
    transport.queue(404, json.dumps({"error_key": "not_found", "error_message": "no such contact"}))

    with pytest.raises(ServiceException) as exc_info:
        service.get_bounces("1100394165290")

    error = exc_info.value
    assert isinstance(error.cause, ApiError)
    assert error.cause.status_code == 404
    assert error.cause.error_key == "not_found"
    assert error.status_code == 404
    assert error.url == f"{BASE_URL}{CAMPAIGN_PATH}/bounces"
    assert error.__cause__ is error.cause


@pytest.mark.parametrize("limit", [0, 501, -1, True, "10"])
def test_out_of_range_limit_never_reaches_transport(service, transport, limit):
    with pytest.raises(InvalidArgumentError):
        service.get_opens("1100394165290", limit=limit)
    assert transport.calls == []


@pytest.mark.parametrize("limit", [1, 500])
def test_limit_bounds_are_accepted(service, transport, limit):
    transport.queue(200, _page([]))
    service.get_opens("1100394165290", limit=limit)
    assert transport.last_url.endswith(f"limit={limit}")


@pytest.mark.parametrize("campaign_id", [None, "", "   "])
def test_empty_campaign_id_is_rejected(service, transport, campaign_id):
    with pytest.raises(InvalidArgumentError):
        service.get_sends(campaign_id)
    with pytest.raises(InvalidArgumentError):
        service.get_summary(campaign_id)
    assert transport.calls == []


def test_empty_link_id_is_rejected(service, transport):
    with pytest.raises(InvalidArgumentError):
        service.get_clicks("1100394165290", link_id="")
    assert transport.calls == []


def test_empty_next_link_is_rejected(service, transport):
    with pytest.raises(InvalidArgumentError):
        service.next_bounces("")
    assert transport.calls == []


def test_get_summary(service, transport):
    transport.queue(200, json.dumps({"sends": 100, "opens": 40, "clicks": 12, "bounces": 2}))
    summary = service.get_summary("1100394165290")

    assert transport.last_url == (
        f"{BASE_URL}{CAMPAIGN_PATH}/reports/summary?updateSummary=true"
    )
    assert summary == TrackingSummary(sends=100, opens=40, clicks=12, bounces=2)


def test_get_summary_empty_body_returns_none(service, transport):
    transport.queue(200, "")
    assert service.get_summary("1100394165290") is None


def test_empty_body_for_page_is_decode_error(service, transport):
    transport.queue(200, "")
    with pytest.raises(ServiceException) as exc_info:
        service.get_opens("1100394165290")
    assert isinstance(exc_info.value.cause, DecodeError)


def test_malformed_json_is_decode_error(service, transport):
    transport.queue(200, "{not json")
    with pytest.raises(ServiceException) as exc_info:
        service.get_opens("1100394165290")
    assert isinstance(exc_info.value.cause, DecodeError)
    assert exc_info.value.status_code is None


def test_transport_failure_is_wrapped(service_kwargs):
    class FailingTransport:
        def send(self, method, url, headers=None, body=None):
            raise TransportError("boom", url=url, method=method)

    service_kwargs["transport"] = FailingTransport()
    service = CampaignTrackingService(**service_kwargs)

    with pytest.raises(ServiceException) as exc_info:
        service.get_opens("1100394165290")
    assert isinstance(exc_info.value.cause, TransportError)


def test_iter_pages_follows_next_links(service, transport):
    transport.queue(200, _page([{"open_date": "2024-01-01T00:00:00Z"}], next_link="/page2"))
    transport.queue(200, _page([{}, {}], next_link="/page3"))
    transport.queue(200, _page([{}]))

    pages = list(iter_pages(service.get_opens("1100394165290"), service.next_opens))

    assert [len(p.results) for p in pages] == [1, 2, 1]
    assert [c["url"] for c in transport.calls[1:]] == [BASE_URL + "/page2", BASE_URL + "/page3"]
