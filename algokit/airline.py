"""A small flight booking system backed by a plain text file."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Optional, Sequence, Union

PathType = Union[str, "PathLike[str]"]

INITIAL_FLIGHTS = (
    "F101 Bhubaneswar Delhi 50",
    "F102 Hyderabad Mumbai 40",
    "F103 Bangalore Noida 2",
)


class BookingError(Exception):
    """Raised when a booking cannot be made."""


@dataclass
class Flight:
    """One flight and its free seats."""

    number: str
    destination: str
    departure: str
    seats: int


def _parse(line: str) -> Flight:
    parts = line.split()
    if len(parts) != 4:
        raise ValueError(f"malformed flight line: {line!r}")
    number, destination, departure, seats = parts
    return Flight(number, destination, departure, int(seats))


def _format(flight: Flight) -> str:
    return f"{flight.number} {flight.destination} {flight.departure} {flight.seats}"


def write_initial_flights(path: PathType) -> None:
    """Write the starting flight list to ``path``."""
    Path(path).write_text("".join(f"{line}\n" for line in INITIAL_FLIGHTS))


def load_flights(path: PathType) -> list[Flight]:
    """Read every flight stored in ``path``."""
    with open(path, encoding="utf-8") as handle:
        return [_parse(line) for line in handle if line.strip()]


def save_flights(path: PathType, flights: Sequence[Flight]) -> None:
    """Write ``flights`` to ``path``, one per line."""
    with open(path, "w", encoding="utf-8") as handle:
        for flight in flights:
            handle.write(_format(flight) + "\n")


def book_seats(path: PathType, flight_no: str, seats: int) -> int:
    """Book ``seats`` on ``flight_no`` and return the seats left.

    Raises ``ValueError`` for a non-positive seat count and ``BookingError``
    when the flight is unknown or has too few seats. The file is unchanged
    when the booking fails.
    """
    if seats <= 0:
        raise ValueError("Invalid seat number!")
    flights = load_flights(path)
    matching = [flight for flight in flights if flight.number == flight_no]
    if not matching:
        raise BookingError("Flight not found!")
    if any(flight.seats < seats for flight in matching):
        raise BookingError("Not enough seats available!")
    for flight in matching:
        flight.seats -= seats
    save_flights(path, flights)
    return matching[-1].seats


def _display(path: PathType) -> None:
    try:
        print(Path(path).read_text(encoding="utf-8"), end="")
    except FileNotFoundError:
        print("Error: File not found!")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive booking menu; the optional argument names the data file."""
    args = list(sys.argv[1:] if argv is None else argv)
    path = args[0] if args else "Flight.txt"
    try:
        write_initial_flights(path)
    except OSError:
        print("Error: File not created!")
        return 1
    try:
        while True:
            print("\nWelcome to Airline Management System")
            print("------------------------------------")
            print("1. Display Flight Details")
            print("2. Book a Ticket")
            print("3. Exit")
            try:
                choice = int(input("Enter your choice: ").strip())
            except ValueError:
                print("Invalid input! Please enter a number.")
                continue
            if choice == 1:
                _display(path)
                input("Press Enter to continue...")
            elif choice == 2:
                flight_no = input("Enter Flight No.: ").strip()
                try:
                    requested = int(input("Enter No. of Seats: ").strip())
                    if requested <= 0:
                        raise ValueError
                except ValueError:
                    print("Invalid seat number!")
                    continue
                try:
                    left = book_seats(path, flight_no, requested)
                except BookingError as error:
                    print(error)
                except FileNotFoundError:
                    print("Error: File not found!")
                else:
                    print(f"Ticket Booked Successfully! Updated seats: {left}")
                input("Press Enter to continue...")
            elif choice == 3:
                print("Exiting system. Thank you!")
                return 0
            else:
                print("Invalid choice! Please try again.")
    except EOFError:
        return 0


if __name__ == "__main__":
    raise SystemExit(main())