"""
Segmentation classifier tests.

Run with: pytest tests/unit/test_segmentation.py -v
"""

import pytest

from models.customer import Customer
from models.segmentation import CustomerSegment
from services.metrics_service import derive_metrics
from services.segmentation_service import classify, classify_customer, classify_segmentation


def _customer(customer_id="1", pets_count=0) -> Customer:
    return Customer(id=customer_id, name=f"Owner {customer_id}", pets_count=pets_count)


class TestClassify:
    def test_high_health_is_vip(self):
        assert classify(_customer(), health_score=90, lifetime_value=0) is CustomerSegment.VIP

    def test_low_health_is_at_risk(self):
        assert classify(_customer(), health_score=30, lifetime_value=1000) is CustomerSegment.AT_RISK

    def test_vip_beats_at_risk(self):
        assert classify(_customer(), health_score=20, lifetime_value=40000) is CustomerSegment.VIP
        assert classify(_customer(pets_count=3), health_score=20, lifetime_value=0) is CustomerSegment.VIP

    def test_default_is_active(self):
        assert classify(_customer(pets_count=2), health_score=50, lifetime_value=39999) is CustomerSegment.ACTIVE

    @pytest.mark.parametrize("health,ltv,pets,expected", [
        (85, 0, 0, CustomerSegment.VIP),
        (84, 0, 0, CustomerSegment.ACTIVE),
        (49, 0, 0, CustomerSegment.AT_RISK),
        (50, 0, 0, CustomerSegment.ACTIVE),
        (60, 40000, 0, CustomerSegment.VIP),
        (60, 0, 3, CustomerSegment.VIP),
    ])
    def test_boundaries(self, health, ltv, pets, expected):
        assert classify(_customer(pets_count=pets), health, ltv) is expected


class TestClassifySegmentation:
    def test_uses_derived_metrics(self):
        # id 1: health 37, ltv 17345 -> at-risk
        # id 2: health 74, ltv 29690 -> active
        # id 4: health 47, ltv 54380 -> vip through lifetime value
        # id 5 with three pets -> vip
        customers = [_customer("1"), _customer("2"), _customer("4"), _customer("5", pets_count=3)]
        entries = classify_segmentation(customers)

        assert [(e.customer_id, e.segment) for e in entries] == [
            (1, CustomerSegment.AT_RISK),
            (2, CustomerSegment.ACTIVE),
            (4, CustomerSegment.VIP),
            (5, CustomerSegment.VIP),
        ]

    def test_one_entry_per_customer(self):
        customers = [_customer(str(i)) for i in range(1, 51)]
        entries = classify_segmentation(customers)
        assert len(entries) == 50
        assert all(e.segment in set(CustomerSegment) for e in entries)

    def test_matches_classify(self):
        customer = _customer("23", pets_count=1)
        metrics = derive_metrics(23)
        assert classify_customer(customer) is classify(
            customer, metrics.health_score, metrics.lifetime_value
        )

    def test_non_numeric_id(self):
        entries = classify_segmentation([_customer("abc")])
        assert entries[0].customer_id == 0
        # metrics fall back to seed 1 -> at-risk
        assert entries[0].segment is CustomerSegment.AT_RISK

    def test_empty(self):
        assert classify_segmentation([]) == []
