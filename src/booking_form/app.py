"""
Console entrypoint.

Reads one JSON event per line from stdin, routes it through the form and
prints the response as JSON. Useful for driving the form by hand:

    echo '{"type": "fieldChanged", "name": "ticketTypeId", "value": "vip"}' | booking-form
"""

import json
import sys
from typing import IO, Optional

from booking_form.config.settings import Settings
from booking_form.handlers.events import handle_event
from booking_form.services.form_machine import BookingFormMachine
from booking_form.utils.error_handling import ValidationError, to_response


def run(stream: IO[str], out: IO[str], machine: Optional[BookingFormMachine] = None) -> int:
    """Process every event line; returns the number of events handled."""
    machine = machine or BookingFormMachine(settings=Settings.from_environment())
    handled = 0
    for line in stream:
        line = line.strip()
        if not line:
            continue
        try:
            payload = json.loads(line)
        except json.JSONDecodeError:
            response = to_response(ValidationError("Event is not valid JSON"))
        else:
            response = handle_event(machine, payload)
            handled += 1
        out.write(json.dumps(response) + "\n")
    return handled


def main() -> None:
    """Drive a single booking session from stdin."""
    run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    main()
