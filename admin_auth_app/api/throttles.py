"""Login throttling.

DRF rates only understand a single unit per period ("5/m"). The admin login
needs "5 per 15 minutes", so the period may carry a multiplier: "5/15m".
"""

import re

from django.conf import settings
from rest_framework.throttling import SimpleRateThrottle

PERIOD_SECONDS = {"s": 1, "m": 60, "h": 3600, "d": 86400}
PERIOD_PATTERN = re.compile(r"^(\d*)([smhd])")


class AdminLoginRateThrottle(SimpleRateThrottle):
    """Limit login attempts per client IP, successful ones included."""

    scope = "admin_login"

    def get_rate(self):
        return settings.ADMIN_LOGIN_THROTTLE_RATE

    def parse_rate(self, rate):
        if rate is None:
            return (None, None)
        num, period = rate.split("/")
        match = PERIOD_PATTERN.match(period)
        if match is None:
            raise ValueError(f"Invalid throttle period: {period!r}")
        multiplier = int(match.group(1) or 1)
        return int(num), multiplier * PERIOD_SECONDS[match.group(2)]

    def get_cache_key(self, request, view):
        return self.cache_format % {"scope": self.scope, "ident": self.get_ident(request)}
