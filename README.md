# ecfmp

A small library holding the flight information region (FIR) model used by
flow management data. Each region has a numeric id, an ICAO-style
identifier such as `EGTT`, and a human-readable name such as `London`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from ecfmp.flight_information_region import FlightInformationRegion

london = FlightInformationRegion(1, "EGTT", "London")

print(london.id)          # 1
print(london.identifier)  # EGTT
print(london.name)        # London
```

`FlightInformationRegion` is a frozen dataclass. Its fields cannot be
reassigned once it is created. Two regions with the same id, identifier and
name compare equal and hash the same, so regions can be used in sets and as
dictionary keys.

## What this package does not do

The package holds only the region model. It does not fetch or parse flow
management data. It has no collections of regions, no events, flow measures
or filters, and no event bus. It provides no command-line tool.