# matches/throttles.py

from rest_framework.throttling import ScopedRateThrottle


class MatchJoinThrottle(ScopedRateThrottle):
    """
    Throttle join/leave/maybe per user.

    Scope key: 'match-join'
    Cache key shape:
      throttle_match-join_u<user_id>
    """
    scope = "match-join"

    def get_cache_key(self, request, view):
        if request.method != "POST":
            return None

        user = getattr(request, "user", None)
        if not user or not user.is_authenticated:
            return None

        return f"throttle_{self.scope}_u{user.pk}"
