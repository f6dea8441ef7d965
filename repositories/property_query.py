"""
repositories/property_query.py
------------------------------
SQL assembly for the property search.

Filters are collected as an ordered list of Predicate triples and rendered
in one pass, so each `%s` placeholder is emitted in the same step that
appends its value. The Nth placeholder in the query text therefore always
binds the Nth parameter, whatever combination of filters is present.
"""

from dataclasses import dataclass
from typing import Any

from models.property import PropertySearchOptions

PROPERTY_COLUMNS = (
    "id", "owner_id", "title", "description", "thumbnail_photo_url",
    "cost_per_night", "parking_spaces", "number_of_bathrooms",
    "number_of_bedrooms", "country", "street", "city", "province",
    "post_code", "active", "cover_photo_url",
)

AVERAGE_RATING = "avg(property_reviews.rating)"

_SEARCH_SELECT = (
    "SELECT "
    + ", ".join(f"properties.{c}" for c in PROPERTY_COLUMNS)
    + f", {AVERAGE_RATING} AS average_rating\n"
    "FROM properties\n"
    "JOIN property_reviews ON properties.id = property_reviews.property_id"
)


@dataclass(frozen=True)
class Predicate:
    """
    One `column operator value` condition.

    BETWEEN takes a (low, high) tuple and binds two parameters.
    """
    column: str
    operator: str
    value: Any

    def render(self) -> tuple[str, list]:
        if self.operator == "BETWEEN":
            low, high = self.value
            return f"{self.column} BETWEEN %s AND %s", [low, high]
        return f"{self.column} {self.operator} %s", [self.value]


def render_predicates(predicates: list[Predicate]) -> tuple[str, list]:
    """
    Join predicates with AND.

    Returns:
        (sql_fragment, params) with params in placeholder order.
        An empty list renders as ("", []).
    """
    clauses: list[str] = []
    params: list = []
    for predicate in predicates:
        clause, values = predicate.render()
        clauses.append(clause)
        params.extend(values)
    return " AND ".join(clauses), params


def build_search_predicates(
    options: PropertySearchOptions,
) -> tuple[list[Predicate], list[Predicate]]:
    """
    Translate search options into row filters and aggregate filters.

    Returns:
        (where, having). Row filters come in the order owner, price;
        the rating filter compares the aggregate and belongs after GROUP BY.
    """
    where: list[Predicate] = []
    having: list[Predicate] = []

    if options.owner_id:
        where.append(Predicate("properties.owner_id", "=", options.owner_id))

    low = options.minimum_price_per_night
    high = options.maximum_price_per_night
    if low and high:
        where.append(Predicate("properties.cost_per_night", "BETWEEN", (low, high)))
    elif low:
        where.append(Predicate("properties.cost_per_night", ">=", low))
    elif high:
        where.append(Predicate("properties.cost_per_night", "<=", high))

    if options.minimum_rating:
        having.append(Predicate(AVERAGE_RATING, ">=", options.minimum_rating))

    return where, having


def build_property_search(options: PropertySearchOptions, limit: int) -> tuple[str, list]:
    """
    Build the full search statement.

    Returns:
        (sql, params) ready for `cursor.execute`. The limit is always the
        last parameter.
    """
    where, having = build_search_predicates(options)
    params: list = []
    parts = [_SEARCH_SELECT]

    if where:
        fragment, values = render_predicates(where)
        parts.append(f"WHERE {fragment}")
        params.extend(values)

    parts.append("GROUP BY properties.id")

    if having:
        fragment, values = render_predicates(having)
        parts.append(f"HAVING {fragment}")
        params.extend(values)

    parts.append("ORDER BY properties.cost_per_night ASC")
    parts.append("LIMIT %s;")
    params.append(limit)

    return "\n".join(parts), params
