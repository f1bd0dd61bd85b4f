"""Print a risk overview for one vehicle group.

Reads GPS_API_BASE, GPS_API_USER, GPS_API_PASSWORD and OPENWEATHER_KEY from
the environment (or a .env file).
"""

import sys

from fleetrisk.data import FleetDataError, get_repository
from fleetrisk.formatters import format_km, risk_level_label, service_status_label
from fleetrisk.services import FleetRiskService, simulate_fuel_anomaly


def main(group_code: str) -> None:
    service = FleetRiskService(get_repository())
    try:
        views = service.assess_group(group_code)
    except FleetDataError as exc:
        print(f"Could not load group {group_code}: {exc}")
        return

    summary = service.summarize(views)
    print(f"=== {group_code}: {summary.total} vehicles ===")
    print(f"  Critical: {summary.critical}  Warning: {summary.warning}  OK: {summary.ok}")

    for view in sorted(views, key=lambda v: v.assessment.risk_score, reverse=True):
        a = view.assessment
        print(f"\n{a.vehicle_name} ({a.plate or a.vehicle_id})")
        print(f"  Risk: {a.risk_score} {risk_level_label(a.risk_level)}  {view.trend.emoji} {view.trend.label}")
        print(f"  Action: {view.action.label}")
        for reason in a.reasons:
            print(f"    - {reason.type.value}: {reason.value}")
        if view.weather and view.weather.reasons:
            print(f"  Weather (+{view.weather.bump}): {', '.join(view.weather.reasons)}")
        if view.fuel and view.fuel.reason:
            print(f"  Fuel: {view.fuel.reason} ({view.fuel.fuel_drop} l / {view.fuel.duration_minutes} min)")
        s = view.service
        print(f"  Service: {service_status_label(s.status)}, {format_km(s.remaining_km)} left")

    print("\n=== Simulated fuel drop of 6 l ===")
    print(f"  {simulate_fuel_anomaly(6).model_dump()}")


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else "DEFAULT")
