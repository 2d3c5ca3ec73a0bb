"""Flight information regions (FIRs) known to the flow management system."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FlightInformationRegion:
    """An immutable flight information region.

    ``id`` is the numeric identifier assigned by the API, ``identifier`` is the
    ICAO code of the region (e.g. ``EGTT``) and ``name`` its human readable
    name (e.g. ``London``).
    """

    id: int
    identifier: str
    name: str