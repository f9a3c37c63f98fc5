COLLECT_URL = "https://ssl.google-analytics.com/collect"
PAYLOAD_DATA_FLAG = "payload_data"

PROTOCOL_VERSION = 1
GA_COOKIE = "_ga"
AFFILIATION = "SI"

VERSION = "v"
TRACKING_ID = "tid"
CLIENT_ID = "cid"
HIT_TYPE = "t"
TRANSACTION_ID = "ti"
CURRENCY_CODE = "cu"
