# fitness_assistant

Calculations behind a personal fitness and health tracker. They are plain
functions and dataclasses with no dependencies outside the standard library.

## What it provides

- `fitness_assistant.biomarkers`
  - `classify_value(value, low_threshold, optimal_min, optimal_max, high_threshold)`
    puts a lab value into one of the `Classification` bands: `CRITICAL_LOW`,
    `LOW`, `OPTIMAL`, `HIGH` or `CRITICAL_HIGH`. Any threshold may be `None`.
  - `calculate_adherence(days_taken, total_days)` gives a percentage, and 0.0
    when `total_days` is zero or less.
  - `adherence_between(...)` builds a `SupplementAdherence` for an inclusive
    date range.
  - `validate_supplement_frequency(frequency)` accepts `daily`,
    `twice_daily`, `weekly` or `as_needed`. Any other value raises
    `ValueError`.
- `fitness_assistant.biometrics`
  - Recovery: `calculate_recovery_score(hrv_current, hrv_baseline)` is clamped
    to 0–100, and is 50 when the baseline is not positive. `recovery_status(score)`
    gives `excellent`, `good`, `moderate`, `low` or `poor`.
  - Zones: `max_heart_rate_for_age(age)` is 220 minus age, and uses age 30
    when age is `None`. `calculate_zones_percentage(max_hr)` returns five
    `HeartRateZone`s. `calculate_zone_distribution(heart_rates, zones)` turns
    `(bpm, seconds)` readings into `ZoneDistribution`s.
  - Resting heart rate: `detect_hr_anomaly(current, baseline)` returns the
    deviation percentage and whether it exceeds 10%. `resting_hr_trend(current_avg, baseline_avg)`
    gives `increasing`, `decreasing` or `stable`.
  - Input checks: `validate_heart_rate(bpm, context)` and
    `validate_hrv(rmssd, sdnn, context)` return the context that applies
    (`resting` and `morning` by default). They raise `ValueError` on bad input.
- `fitness_assistant.data`
  - `delete_all_user_data(connection, user_id)` removes every row a user owns
    in one transaction. Child rows go before their parents. It returns a
    `DeletionSummary`, and `DeletionSummary.total()` adds up its counts.
  - `verify_deletion(connection, user_id)` returns `True` when no rows are left.
  - Both functions take a DB-API connection that uses the `qmark` parameter
    style, such as `sqlite3`.
- `fitness_assistant.health`
  - `health_check()` and `liveness_check()` return a `HealthResponse`.
  - `readiness_check(probe)` calls `probe` and returns a pair: an
    `HTTPStatus` and a `HealthResponse`. The status is 200 when `probe`
    returns, and 503 with the error message when it raises.
  - `HealthResponse.to_dict()` gives a JSON-ready mapping.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from fitness_assistant.biomarkers import classify_value, calculate_adherence
from fitness_assistant.biometrics import (
    calculate_recovery_score,
    recovery_status,
    calculate_zones_percentage,
    detect_hr_anomaly,
)

classify_value(220.0, None, None, 200.0, 240.0)   # Classification.HIGH
calculate_adherence(15, 30)                        # 50.0

score = calculate_recovery_score(45.0, 60.0)       # 75.0
recovery_status(score)                             # "good"

zones = calculate_zones_percentage(200)
zones[0].min_bpm, zones[4].max_bpm                 # (100, 200)

detect_hr_anomaly(72.0, 60.0)                      # (20.0, True)
```

Health probes:

```python
from fitness_assistant.health import readiness_check

status, response = readiness_check(lambda: None)
status                                  # HTTPStatus.OK
response.to_dict()["status"]            # "ready"
```

## What it does not do

This package contains no web server, no HTTP routes and no authentication. It
has no command-line program. It does not create or manage a database schema.
The data functions expect the tables to exist already, on a connection that
you supply. Logging, history storage and lookups of reference ranges are left
to the application that uses these functions.