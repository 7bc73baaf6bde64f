from __future__ import annotations

import pytest

from attendance_tracker.analytics.dashboard import DashboardService, compliance_status, performance_tier
from attendance_tracker.core.enums import PerformanceTier


def test_performance_tier_bands():
    assert performance_tier(85) == PerformanceTier.EXCELLENT
    assert performance_tier(84.9) == PerformanceTier.GOOD
    assert performance_tier(75) == PerformanceTier.GOOD
    assert performance_tier(74.9) == PerformanceTier.CRITICAL


def test_compliance_status_labels():
    assert compliance_status([]) == "Good"
    assert compliance_status(["a"]) == "1 Alert"
    assert compliance_status(["a", "b"]) == "2 Alerts"


def test_dashboard_cards_keep_display_order_and_ranked_sorts(make_subject):
    low = make_subject("Low", "PA")
    high = make_subject("High", "PPPPPPPPPA")

    data = DashboardService().build([low, high])

    assert [c["name"] for c in data.cards] == ["Low", "High"]
    assert [c["name"] for c in data.ranked] == ["High", "Low"]
    assert data.cards[0]["tier"] == "critical"
    assert data.cards[1]["tier"] == "excellent"
    assert data.cards[1]["percentage_label"] == "90.0%"
    assert data.subject_count == 2
    assert data.overall.total_classes == 12
    assert data.alerts == ["Low attendance is 50.0% (Below 75%)"]
    assert data.compliance_status == "1 Alert"
    assert data.overall.overall_percentage == pytest.approx(83.333, abs=1e-3)
    assert data.insights[0].title == "Good Attendance"
