"""
seat_reservations – Event-sourced seat reservations for cinema screenings.

Import path convention::

    from seat_reservations.domain import Screening, SeatReservedEvent
    from seat_reservations.application.reservations import ReserveSeatsCommand
    from seat_reservations.bootstrap import bootstrap
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
