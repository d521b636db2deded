"""
BDD Steps Import Module

Registers every Gherkin step definition (Given/When/Then) with pytest-bdd.
Imported by conftest.py so the steps are visible to all feature files.
"""

from test.service.course_booking.integration.steps.booking.given import *  # noqa: E402, F403
from test.service.course_booking.integration.steps.booking.then import *  # noqa: E402, F403
from test.service.course_booking.integration.steps.booking.when import *  # noqa: E402, F403
