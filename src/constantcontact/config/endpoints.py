"""Centralized endpoint templates for the Constant Contact v2 API.

Every path the services call is defined here. Placeholders use the
``{name}`` form and are expanded by
:func:`constantcontact.utils.url_builder.build_url`.
"""


class Endpoints:
    """Single source of truth for API endpoint templates.

    All templates are paths relative to the configured base URL. The
    path and query parameter names are fixed by the remote API.
    """

    # Account
    ACCOUNT_INFO = "/v2/account/info"
    ACCOUNT_VERIFIED_ADDRESSES = "/v2/account/verifiedemailaddresses"

    # Contacts
    CONTACTS = "/v2/contacts"
    CONTACT = "/v2/contacts/{contactId}"

    # Contact lists
    LISTS = "/v2/lists"
    LIST = "/v2/lists/{listId}"
    LIST_CONTACTS = "/v2/lists/{listId}/contacts"

    # Email campaigns
    CAMPAIGNS = "/v2/emailmarketing/campaigns"
    CAMPAIGN = "/v2/emailmarketing/campaigns/{campaignId}"

    # Campaign tracking (Paged envelope family)
    CAMPAIGN_TRACKING_SUMMARY = (
        "/v2/emailmarketing/campaigns/{campaignId}/tracking/reports/summary"
        "?updateSummary=true"
    )
    CAMPAIGN_TRACKING_BOUNCES = "/v2/emailmarketing/campaigns/{campaignId}/tracking/bounces"
    CAMPAIGN_TRACKING_CLICKS = "/v2/emailmarketing/campaigns/{campaignId}/tracking/clicks"
    CAMPAIGN_TRACKING_CLICKS_BY_LINK = (
        "/v2/emailmarketing/campaigns/{campaignId}/tracking/clicks/{linkId}"
    )
    CAMPAIGN_TRACKING_FORWARDS = "/v2/emailmarketing/campaigns/{campaignId}/tracking/forwards"
    CAMPAIGN_TRACKING_OPENS = "/v2/emailmarketing/campaigns/{campaignId}/tracking/opens"
    CAMPAIGN_TRACKING_SENDS = "/v2/emailmarketing/campaigns/{campaignId}/tracking/sends"
    CAMPAIGN_TRACKING_OPT_OUTS = (
        "/v2/emailmarketing/campaigns/{campaignId}/tracking/unsubscribes"
    )

    # Contact tracking (ResultSet envelope family)
    CONTACT_TRACKING_ALL = "/v2/contacts/{contactId}/tracking"
    CONTACT_TRACKING_SUMMARY = "/v2/contacts/{contactId}/tracking/reports/summary"
    CONTACT_TRACKING_SUMMARY_BY_CAMPAIGN = (
        "/v2/contacts/{contactId}/tracking/reports/summaryByCampaign"
    )
    CONTACT_TRACKING_BOUNCES = "/v2/contacts/{contactId}/tracking/bounces"
    CONTACT_TRACKING_CLICKS = "/v2/contacts/{contactId}/tracking/clicks"
    CONTACT_TRACKING_FORWARDS = "/v2/contacts/{contactId}/tracking/forwards"
    CONTACT_TRACKING_OPENS = "/v2/contacts/{contactId}/tracking/opens"
    CONTACT_TRACKING_SENDS = "/v2/contacts/{contactId}/tracking/sends"
    CONTACT_TRACKING_UNSUBSCRIBES = "/v2/contacts/{contactId}/tracking/unsubscribes"

    # Page size bounds accepted by every endpoint that takes ``limit``
    MIN_LIMIT = 1
    MAX_LIMIT = 500
