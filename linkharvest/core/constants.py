# Page markers
CONTAINER_SELECTOR = ".infinite-scroll-component"
ITEM_SELECTOR = ".infinite-scroll-component a.no-style"
TITLE_SELECTOR = '[data-test-id="collection-title"]'
COUNT_SELECTOR = '[data-test-id="collection-items-count"]'

# Timing (in milliseconds)
DEFAULT_SCROLL_DELAY_MS = 800
DEFAULT_GROWTH_TIMEOUT_MS = 30000

# Browser Settings
DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/119.0.0.0 Safari/537.36"
DEFAULT_VIEWPORT = {"width": 1280, "height": 926}
DEFAULT_LAUNCH_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]
DEFAULT_WAIT_UNTIL = "load"

# Output
DEFAULT_OUTPUT_FILE = "items.txt"
MAX_LOG_SIZE_BYTES = 10 * 1024 * 1024  # 10 MB

# Above this many items the run is announced in minutes rather than seconds
LONG_RUN_ITEM_THRESHOLD = 100

# State Mapping
STATE_EMOJIS = {
    "INIT": "🔍",
    "EXTRACTING": "🧲",
    "SCROLLING": "🖱️",
    "WAITING_GROWTH": "⏳",
    "STALLED_FAIL": "❌",
    "DONE": "✅"
}
