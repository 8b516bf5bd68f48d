"""Typed record shapes returned by the Polymarket Gamma API.

Every record is a ``TypedDict`` with all keys optional: the API omits
fields freely and the client hands back the decoded JSON unchanged apart
from the JSON-string fields it normalises.  Records are read-only
snapshots; nothing here carries identity or behaviour.
"""

from typing import Literal, TypedDict

OrderBy = Literal["liquidity", "volume", "created_at", "end_date"]


class Category(TypedDict, total=False):
    """Category used to group markets and events."""

    id: str
    label: str
    slug: str


class Sport(TypedDict, total=False):
    """Sport covered by sports markets."""

    id: str
    name: str
    slug: str


class Team(TypedDict, total=False):
    """Sports team referenced by sports markets."""

    id: str
    name: str
    short_name: str
    abbreviation: str
    logo: str
    sport_id: str
    sport: Sport


class Tag(TypedDict, total=False):
    """Tag used to organise and filter markets and events."""

    id: str
    label: str
    slug: str
    description: str
    event_count: int
    market_count: int
    parent_id: str
    children: list["Tag"]


class Profile(TypedDict, total=False):
    """Public user profile."""

    id: str
    name: str
    username: str
    avatar_url: str
    bio: str


class Reaction(TypedDict, total=False):
    """Reaction left on a comment."""

    id: str
    comment_id: str
    user: Profile
    type: str
    created_at: str


class Comment(TypedDict, total=False):
    """Comment posted on a market or event."""

    id: str
    market_id: str
    event_id: str
    user: Profile
    content: str
    created_at: str
    updated_at: str
    parent_id: str
    reactions: list[Reaction]
    reply_count: int


class ClobReward(TypedDict, total=False):
    """Liquidity reward attached to a market's order book."""

    id: str
    market_id: str
    event_id: str
    reward_epoch: int
    asset_address: str
    reward_amount: str
    start_date: str
    end_date: str


class Creator(TypedDict, total=False):
    """Market creator."""

    id: str
    name: str
    avatar_url: str


class Series(TypedDict, total=False):
    """Series or tournament of related events."""

    id: str
    slug: str
    title: str
    description: str
    image: str
    created_at: str
    updated_at: str
    events: list["Event"]
    categories: list[Category]


class Event(TypedDict, total=False):
    """Event grouping one or more markets."""

    id: str
    slug: str
    title: str
    description: str
    start_date: str
    end_date: str
    image: str
    icon: str
    created_at: str
    updated_at: str
    archived: bool
    active: bool
    closed: bool
    restricted: bool
    liquidity: float
    volume: str
    markets: list["GammaMarket"]
    tags: list[Tag]
    categories: list[Category]
    series: list[Series]
    comment_count: int
    enable_comment: bool
    ticker: str


class GammaMarket(TypedDict, total=False):
    """Prediction market as described by the Gamma API.

    ``outcomes``, ``outcome_prices`` and ``clob_token_ids`` arrive as
    JSON-encoded strings and are returned as lists after normalisation.
    """

    id: str
    condition_id: str
    question_id: str
    slug: str
    question: str
    twitter_card_image: str
    resolution_source: str
    end_date: str
    category: str
    amm_type: str
    liquidity: float
    sponsor_name: str
    sponsor_image: str
    start_date: str
    x_axis_value: str
    y_axis_value: str
    denomination_token: str
    fee: str
    image: str
    icon: str
    lower_bound: str
    upper_bound: str
    description: str
    outcomes: list[str]
    outcome_prices: list[str]
    volume: str
    active: bool
    market_type: str
    format_type: str
    lower_bound_date: str
    upper_bound_date: str
    closed: bool
    market_maker_address: str
    created_by: int
    updated_by: int
    created_at: str
    updated_at: str
    closed_time: str
    wide_format: bool
    new: bool
    mailchimp_tag: str
    featured: bool
    archived: bool
    resolved_by: str
    restricted: bool
    market_group: int
    group_item_title: str
    group_item_threshold: str
    uma_end_date: str
    uma_resolution_statuses: list[str]
    seconds_delay: int
    notification_policy: int
    pager_duty_notification_enabled: bool
    reward_pool: float
    reward_epoch: int
    reward_multiplier: float
    reward_min_size: float
    reward_max_spread: float
    ready: bool
    enable_order_book: bool
    notification_type: str
    uma_reward: str
    question_title: str
    enable_ask: bool
    notifications: list[int]
    events: list[Event]
    markets: list["GammaMarket"]
    clob_token_ids: list[str]
    clobRewards: list[ClobReward]  # noqa: N815
    tags: list[Tag]
    cyom: bool
    competitive: float
    neg_risk: bool
    neg_risk_market_id: str
    neg_risk_request_id: str
    accepting_orders: bool
    accepting_order_timestamp: str
    minimum_order_size: float
    minimum_tick_size: float
    taker_fee_bps: int
    maker_fee_bps: int
    minimum_tick_size_usd: float
    maker_base_fee: int
    taker_base_fee: int
    best_bid: str
    best_ask: str
    spread: float
    spread_percent: float
    volume_24hr: str
    volume_num_trades_24hr: int
    last_trade_price: str
    last_trade_time: str
    open_interest: str
    rewards_daily_rate: float
    rewards_min_size: float
    rewards_max_spread: float
    seconds_delay_requested: int
    auto_update_schema: bool
    active_trading_prompt: bool


class Collection(TypedDict, total=False):
    """Curated collection of markets."""

    id: str
    title: str
    slug: str
    description: str
    markets: list[GammaMarket]


class SearchResults(TypedDict, total=False):
    """Results of a ``/public-search`` query."""

    events: list[Event]
    tags: list[Tag]
    profiles: list[Profile]


class Pagination(TypedDict, total=False):
    """Pagination metadata returned alongside a page of records."""

    hasMore: bool  # noqa: N815
    totalResults: int  # noqa: N815


class PaginatedEvents(TypedDict, total=False):
    """One page of events from ``/events/pagination``."""

    data: list[Event]
    pagination: Pagination
