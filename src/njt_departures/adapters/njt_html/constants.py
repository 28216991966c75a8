"""Constants for the NJ TRANSIT DepartureVision mobile pages.

The pages are plain HTML tables. Station boards list one departure per
``<tr>`` with ``<td>`` cells; train stop lists hold one ``<p>`` per ``<tr>``.
"""

# Live provider and local debug server
NJT_LIVE_BASE_URL = "http://dv.njtransit.com/mobile"
NJT_ALTERNATE_BASE_URL = "http://127.0.0.1:8000"

STATION_PATH = "tid-mobile.aspx?SID={code}&SORT=A"
TRAIN_STOPS_PATH = "train_stops.aspx?sid={origin}&train={prefix}{train}"
ALTERNATE_STATION_PATH = "njtransit-{code}.html"
ALTERNATE_TRAIN_STOPS_PATH = "njtransit-train-{origin}-{prefix}{train}.html"

# Two-character train ids are zero padded by the live train stops page
SHORT_TRAIN_ID_LENGTH = 2
SHORT_TRAIN_ID_PREFIX = "00"

# Local cache file names
STATION_CACHE_FILE = "njtransit-{code}.html"
TRAIN_STOPS_CACHE_FILE = "njtransit-train-{origin}-{train}.html"

# Tag patterns
ROW_OPEN_PATTERN = r"<tr[^>]*>"
ROW_CLOSE_PATTERN = r"</tr>"
CELL_OPEN_PATTERN = r"<td[^>]*>"
CELL_CLOSE_PATTERN = r"</td>"
PARAGRAPH_OPEN_PATTERN = r"<p[^>]*>"
PARAGRAPH_CLOSE_PATTERN = r"</p>"

# Row markers
HEADER_MARKER = "DEP"
COLSPAN_MARKER = "<td colspan="

# Field normalization
SECONDARY_PLATFORM_MARKER = "&nbsp;-"
SECONDARY_PLATFORM_ANNOTATION = " (SEC)"
SINGLE_TRACK_LABEL = "Single"
SINGLE_TRACK_NUMBER = "1"
STOP_STATUS_SEPARATOR = "&nbsp;&nbsp;"

DEFAULT_HEADERS = {
    "Accept": "text/html",
    "User-Agent": "Mozilla/5.0",
}
