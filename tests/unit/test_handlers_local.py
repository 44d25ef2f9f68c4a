"""
Local handler tests using mocks.

These tests validate handler logic without touching the upstream API.
The CustomerService is replaced with a MagicMock.

Run with: pytest tests/unit/test_handlers_local.py -v
"""

import json
from unittest.mock import MagicMock, patch

import pytest

from models.customer import Customer, CustomerDetail, Pet
from models.results import CustomerDetailResult, CustomersResult, FetchResult


def _customers():
    return [
        Customer(id="1", name="George Franklin", city="Madison", pets_count=1),
        Customer(id="2", name="Betty Davis", city="Sun Prairie", pets_count=0),
        Customer(id="4", name="Harold Davis", city="Madison", pets_count=3),
    ]


@pytest.fixture
def mock_service():
    service = MagicMock()
    service.get_customers_from_source.return_value = CustomersResult(customers=_customers())
    return service


class TestHealthCheckHandler:
    """Test the health check endpoint."""

    def test_health_check_returns_200(self):
        from handlers.health_check import lambda_handler

        result = lambda_handler({}, None)

        assert result["statusCode"] == 200
        body = json.loads(result["body"])
        assert body["status"] == "ok"
        assert "timestamp" in body

    def test_health_check_includes_environment(self):
        from handlers.health_check import lambda_handler

        with patch.dict("os.environ", {"ENVIRONMENT": "test"}):
            body = json.loads(lambda_handler({}, None)["body"])
        assert body["environment"] == "test"


class TestCustomersHandler:
    def test_lists_customers(self, mock_service):
        from handlers import customers

        with patch.object(customers, "_get_customer_service", return_value=mock_service):
            resp = customers.lambda_handler({"queryStringParameters": None}, None)

        assert resp["statusCode"] == 200
        body = json.loads(resp["body"])
        assert [c["id"] for c in body["customers"]] == ["1", "2", "4"]
        assert body["total"] == 3
        assert body["error"] is None

    def test_applies_filters_and_sort(self, mock_service):
        from handlers import customers

        event = {"queryStringParameters": {"city": "madison", "pets": "MANY", "sort": "-name"}}
        with patch.object(customers, "_get_customer_service", return_value=mock_service):
            body = json.loads(customers.lambda_handler(event, None)["body"])

        assert [c["id"] for c in body["customers"]] == ["4"]

    def test_search_and_descending_sort(self, mock_service):
        from handlers import customers

        event = {"queryStringParameters": {"search": "DAVIS", "sort": "-id"}}
        with patch.object(customers, "_get_customer_service", return_value=mock_service):
            body = json.loads(customers.lambda_handler(event, None)["body"])

        assert [c["id"] for c in body["customers"]] == ["4", "2"]

    def test_invalid_bucket_returns_422(self, mock_service):
        from handlers import customers

        event = {"queryStringParameters": {"pets": "lots"}}
        with patch.object(customers, "_get_customer_service", return_value=mock_service):
            resp = customers.lambda_handler(event, None)

        assert resp["statusCode"] == 422
        assert "pets" in json.loads(resp["body"])["message"]

    def test_unknown_sort_field_returns_422(self, mock_service):
        from handlers import customers

        event = {"queryStringParameters": {"sort": "favourite_colour"}}
        with patch.object(customers, "_get_customer_service", return_value=mock_service):
            resp = customers.lambda_handler(event, None)

        assert resp["statusCode"] == 422

    def test_unknown_sort_field_on_empty_list_returns_422(self):
        from handlers import customers

        service = MagicMock()
        service.get_customers_from_source.return_value = CustomersResult(customers=[])
        event = {"queryStringParameters": {"sort": "favourite_colour"}}
        with patch.object(customers, "_get_customer_service", return_value=service):
            resp = customers.lambda_handler(event, None)

        assert resp["statusCode"] == 422

    @pytest.mark.parametrize("sort", ["metrics", "-metrics", "model_config", "model_dump"])
    def test_hub_sort_by_non_scalar_returns_422(self, mock_service, sort):
        from handlers import customers

        event = {"queryStringParameters": {"sort": sort}}
        with patch.object(customers, "_get_customer_service", return_value=mock_service):
            resp = customers.hub_handler(event, None)

        assert resp["statusCode"] == 422
        assert "sort field" in json.loads(resp["body"])["message"]

    def test_upstream_failure_is_reported_in_body(self):
        from handlers import customers

        service = MagicMock()
        service.get_customers_from_source.return_value = CustomersResult(
            customers=[], error="Unable to fetch Petclinic owners from any known endpoint."
        )
        with patch.object(customers, "_get_customer_service", return_value=service):
            resp = customers.lambda_handler({}, None)

        assert resp["statusCode"] == 200
        body = json.loads(resp["body"])
        assert body["customers"] == []
        assert body["error"].startswith("Unable to fetch")

    def test_hub(self, mock_service):
        from handlers import customers

        event = {"queryStringParameters": {"segment": "vip", "sort": "-metrics.health_score"}}
        with patch.object(customers, "_get_customer_service", return_value=mock_service):
            resp = customers.hub_handler(event, None)

        assert resp["statusCode"] == 200
        body = json.loads(resp["body"])
        assert [c["id"] for c in body["customers"]] == ["4"]
        assert body["customers"][0]["segment"] == "vip"
        assert "health_score" in body["customers"][0]["metrics"]
        assert body["summary"]["total"] == 3

    def test_hub_invalid_health_range(self, mock_service):
        from handlers import customers

        event = {"queryStringParameters": {"health": "great"}}
        with patch.object(customers, "_get_customer_service", return_value=mock_service):
            resp = customers.hub_handler(event, None)

        assert resp["statusCode"] == 422


class TestCustomerDetailHandler:
    def test_detail_includes_metrics_and_interactions(self):
        from handlers import customer_detail

        service = MagicMock()
        service.get_customer_detail.return_value = CustomerDetailResult(
            customer=CustomerDetail(
                id=2,
                full_name="Betty Davis",
                address=None,
                city="Sun Prairie",
                telephone=None,
                pets=[Pet(id=1, name="Basil", birth_date="2012-08-06", type="hamster")],
            )
        )
        event = {"pathParameters": {"id": "2"}}
        with patch.object(customer_detail, "_get_customer_service", return_value=service):
            resp = customer_detail.lambda_handler(event, None)

        assert resp["statusCode"] == 200
        body = json.loads(resp["body"])
        assert body["customer"]["full_name"] == "Betty Davis"
        assert body["customer"]["address"] is None
        assert body["metrics"]["health_score"] == 74
        assert body["metrics"]["churn_risk"] == "medium"
        assert 4 <= len(body["interactions"]) <= 7
        service.get_customer_detail.assert_called_once_with("2")

    def test_not_found_returns_404(self):
        from handlers import customer_detail

        service = MagicMock()
        service.get_customer_detail.return_value = CustomerDetailResult(
            not_found=True, error="Customer not found."
        )
        with patch.object(customer_detail, "_get_customer_service", return_value=service):
            resp = customer_detail.lambda_handler({"pathParameters": {"id": "999"}}, None)

        assert resp["statusCode"] == 404

    def test_upstream_error_returns_502(self):
        from handlers import customer_detail

        service = MagicMock()
        service.get_customer_detail.return_value = CustomerDetailResult(error="boom")
        with patch.object(customer_detail, "_get_customer_service", return_value=service):
            resp = customer_detail.lambda_handler({"pathParameters": {"id": "3"}}, None)

        assert resp["statusCode"] == 502
        assert json.loads(resp["body"])["message"] == "boom"

    def test_missing_id_returns_422(self):
        from handlers import customer_detail

        resp = customer_detail.lambda_handler({"pathParameters": None}, None)
        assert resp["statusCode"] == 422

    def test_interactions(self):
        from handlers import customer_detail

        resp = customer_detail.interactions_handler({"pathParameters": {"id": "7"}}, None)

        assert resp["statusCode"] == 200
        body = json.loads(resp["body"])
        assert body["customer_id"] == 7
        stamps = [i["occurred_at"] for i in body["interactions"]]
        assert stamps == sorted(stamps, reverse=True)

    def test_interactions_for_large_id(self):
        from handlers import customer_detail

        resp = customer_detail.interactions_handler({"pathParameters": {"id": "300000"}}, None)

        assert resp["statusCode"] == 200
        assert json.loads(resp["body"])["customer_id"] == 300000


class TestAggregateHandlers:
    def test_segmentation(self, mock_service):
        from handlers import segmentation

        with patch.object(segmentation, "_get_customer_service", return_value=mock_service):
            resp = segmentation.lambda_handler({}, None)

        body = json.loads(resp["body"])
        assert body["entries"] == [
            {"customer_id": 1, "segment": "at-risk"},
            {"customer_id": 2, "segment": "active"},
            {"customer_id": 4, "segment": "vip"},
        ]
        assert body["summary"]["total"] == 3

    def test_overview(self, mock_service):
        from handlers import overview

        with patch.object(overview, "_get_customer_service", return_value=mock_service):
            resp = overview.lambda_handler({}, None)

        body = json.loads(resp["body"])
        assert body["total_customers"] == 3
        assert body["customers_with_pets"] == 2
        assert body["vip_customers"] == 1

    def test_debug_owners(self, owner_payload):
        from handlers import debug_owners

        service = MagicMock()
        service.fetch_candidates.return_value = FetchResult(
            data={"_embedded": {"ownerList": owner_payload}},
            endpoints_tried=["http://a", "http://b"],
        )
        with patch.object(debug_owners, "_get_customer_service", return_value=service):
            body = json.loads(debug_owners.lambda_handler({}, None)["body"])

        assert body["endpoints_tried"] == ["http://a", "http://b"]
        assert body["shape"] == "hal_owner_list"
        assert body["layout"] == ["ownerList"]
        assert body["record_count"] == 2

    def test_debug_owners_failure(self):
        from handlers import debug_owners

        service = MagicMock()
        service.fetch_candidates.return_value = FetchResult(
            error="Unable to fetch Petclinic owners from any known endpoint.",
            endpoints_tried=["http://a"],
        )
        with patch.object(debug_owners, "_get_customer_service", return_value=service):
            body = json.loads(debug_owners.lambda_handler({}, None)["body"])

        assert body["shape"] is None
        assert body["record_count"] == 0
        assert body["error"]
