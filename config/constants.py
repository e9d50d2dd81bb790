"""Immutable constants for the sidebar calendar updater."""

# Timezone of the athletics feed (local start/end dates carry no offset)
TIMEZONE = "America/Kentucky/Louisville"

# Home side label used in the rendered table
HOME_TEAM = "Louisville"

# Prefix every game summary line in the feed starts with
SCHOOL_NAME = "University of Louisville"

# Sports recognised on a game summary line
RECOGNIZED_SPORTS = [
    "baseball",
    "basketball",
    "cross country",
    "field hockey",
    "football",
    "golf",
    "lacrosse",
    "rowing",
    "soccer",
    "softball",
    "swimming & diving",
    "tennis",
    "track & field",
    "volleyball",
]

# Sports shown on the sidebar when CALENDAR_SPORTS is not set
DEFAULT_SPORTS = [
    "baseball",
    "basketball",
    "football",
    "soccer",
    "volleyball",
]

# Default date window around "now"
DEFAULT_DAYS_BEFORE = 7
DEFAULT_DAYS_AFTER = 14

# Template placeholder, matched case-insensitively
PLACEHOLDER_PATTERN = r"\{\{\s*calendar\s*\}\}"

# Markdown tokens understood by the subreddit stylesheet
EMPTY_CALENDAR = "[](#calendar/empty)"
WINNER_ANCHOR = "#calendar/winner"
FINAL_LABEL = "Final"
TABLE_HEADER = "Sport|Home Team|Score|Visiting Team|Score|Time|TV"
TABLE_ALIGNMENT = "-|-|-|-|-|-|-"

# TV network icons. Order matters: the first alternative that matches wins,
# so longer names sharing a prefix must come before the shorter ones.
TV_NETWORKS = [
    ("acc network extra", "[](#i/acc-network-extra)"),
    ("acc network", "[](#i/acc-network)"),
    ("abc", "[](#i/abc)"),
    ("big ten network", "[](#i/big-ten-network)"),
    ("cbs sports", "[](#i/cbs-sports)"),
    ("cbs", "[](#i/cbs)"),
    ("espn2", "[](#i/espn2)"),
    ("espn3", "[](#i/espn3)"),
    ("espnu", "[](#i/espnu)"),
    ("espn", "[](#i/espn)"),
    ("fox sports", "[](#i/fox-sports)"),
    ("fox", "[](#i/fox)"),
    ("fs1", "[](#i/fs1)"),
    ("longhorn network", "[](#i/longhorn-network)"),
    ("nbc sports", "[](#i/nbc-sports)"),
    ("nbc", "[](#i/nbc)"),
    ("pac12", "[](#i/pac12-network)"),
    ("rsn", "[](#i/rsn)"),
    ("sec network", "[](#i/sec-network)"),
    ("tbs", "[](#i/tbs)"),
    ("tnt", "[](#i/tnt)"),
    ("tru tv", "[](#i/tru-tv)"),
]

# Compact sport names for the abbreviated display option
SPORT_ABBREVIATIONS = {
    "baseball": "BB",
    "basketball": "BB",
    "cross country": "XC",
    "field hockey": "FH",
    "football": "FB",
    "golf": "GOLF",
    "lacrosse": "LAX",
    "rowing": "ROW",
    "soccer": "SOC",
    "softball": "SFTBL",
    "swimming & diving": "SWIM",
    "tennis": "TEN",
    "track & field": "TRACK",
    "volleyball": "VB",
}
GENDER_ABBREVIATIONS = {
    "men's": "M",
    "women's": "W",
}

# Reddit
REDDIT_TIMEOUT = 10
DEFAULT_WIKI_PAGE = "config/sidebar"
USER_AGENT = "AllHail_Bot-sidebar-updater / v0.1.0 (by /u/AllHail_Bot)"
EDIT_REASON = "[{timestamp}] AllHail_Bot-sidebar-updater"

# Feed request timeout in seconds
FEED_TIMEOUT = 30
