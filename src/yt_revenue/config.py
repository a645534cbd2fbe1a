from pathlib import Path
from typing import Sequence

SCOPES: Sequence[str] = (
    "https://www.googleapis.com/auth/youtube.readonly",
    "https://www.googleapis.com/auth/youtubepartner",
    "https://www.googleapis.com/auth/yt-analytics.readonly",
    "https://www.googleapis.com/auth/yt-analytics-monetary.readonly",
)

CLIENT_SECRETS_FILE = Path("secrets/client_secret.json")
TOKEN_FILE = Path("secrets/youtube-revenue-token.json")
DATA_DIR = Path("data")
REPORT_FILE_PREFIX = "YouTubeRevenueReportWoS"

FIRST_REPORT_YEAR = 2014
CURRENCY = "GBP"
REVENUE_METRIC = "estimatedRevenue"

# Data API listings reject maxResults above 50.
MAX_PAGE_SIZE = 50
PAGE_SIZE = MAX_PAGE_SIZE

COLUMN_WIDTH = 30
NO_RESULTS = "No results Found."
