"""Unit tests for ListingService delegation."""

from unittest.mock import MagicMock

import pytest

from models.property import PropertySearchOptions
from models.user import User
from services.listing_service import ListingService


@pytest.fixture
def service() -> ListingService:
    svc = ListingService()
    svc.user_repo = MagicMock()
    svc.reservation_repo = MagicMock()
    svc.property_repo = MagicMock()
    return svc


class TestUsers:

    def test_get_user_with_email(self, service: ListingService) -> None:
        service.user_repo.get_by_email.return_value = None

        assert service.get_user_with_email("a@x.com") is None
        service.user_repo.get_by_email.assert_called_once_with("a@x.com")

    def test_get_user_with_id(self, service: ListingService) -> None:
        user = User(id=5, name="A", email="a@x.com", password="p")
        service.user_repo.get_by_id.return_value = user

        assert service.get_user_with_id(5) is user

    def test_add_user_builds_model(self, service: ListingService) -> None:
        service.add_user({"name": "A", "email": "a@x.com", "password": "p"})

        service.user_repo.add.assert_called_once_with(
            User(name="A", email="a@x.com", password="p")
        )


class TestReservations:

    def test_default_limit(self, service: ListingService) -> None:
        service.get_all_reservations(1)
        service.reservation_repo.get_all_for_guest.assert_called_once_with(1, 10)


class TestProperties:

    def test_get_all_properties_converts_options(self, service: ListingService) -> None:
        service.property_repo.search.return_value = []

        service.get_all_properties(
            {"minimum_price_per_night": 50, "maximum_price_per_night": 150, "city": "ignored"},
            10,
        )

        service.property_repo.search.assert_called_once_with(
            PropertySearchOptions(minimum_price_per_night=50, maximum_price_per_night=150),
            10,
        )

    def test_get_all_properties_without_options(self, service: ListingService) -> None:
        service.property_repo.search.return_value = []

        assert service.get_all_properties() == []
        service.property_repo.search.assert_called_once_with(PropertySearchOptions(), 10)

    def test_add_property_defaults_counts(
        self, service: ListingService, new_property_data: dict
    ) -> None:
        for key in ("parking_spaces", "number_of_bathrooms", "number_of_bedrooms"):
            del new_property_data[key]

        service.add_property(new_property_data)

        [prop] = service.property_repo.add.call_args.args
        assert prop.owner_id == 123
        assert prop.parking_spaces == 0
        assert prop.number_of_bathrooms == 0
        assert prop.number_of_bedrooms == 0

    def test_add_property_requires_title(
        self, service: ListingService, new_property_data: dict
    ) -> None:
        del new_property_data["title"]

        with pytest.raises(KeyError):
            service.add_property(new_property_data)
        service.property_repo.add.assert_not_called()
