# SPDX-License-Identifier: MIT
"""Interface modules aggregating protocols for dockerqa subsystems.

Import the specific interface modules (e.g. ``dockerqa.interfaces.host``)
directly; this package re-exports nothing.
"""

__all__: tuple[str, ...] = ()
