from datetime import datetime, timezone


MATCH_ID = 'match-paro-vs-thimphu'
OTHER_MATCH_ID = 'match-paro-vs-transport'

BUYER_NAME = 'Pema Lhamo'
BUYER_EMAIL = 'pema@example.com'

FROZEN_NOW = datetime(2025, 3, 1, 8, 30, 0, tzinfo=timezone.utc)

SCRIPT_PAYLOAD = '<script>alert("x")</script>Karma'
ENCODED_SCRIPT_PAYLOAD = '&lt;script&gt;alert(1)&lt;/script&gt;Karma'
