"""Constants for the application."""


# Chromium arguments for the Turnstile-protected dashboard (low memory footprint)
HARDENED_CHROMIUM_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",  # Prevents shared memory crashes
    "--disable-accelerated-2d-canvas",
    "--disable-gpu",
    "--disable-background-networking",
    "--disable-background-timer-throttling",
    "--disable-backgrounding-occluded-windows",
    "--disable-breakpad",
    "--disable-client-side-phishing-detection",
    "--disable-default-apps",
    "--disable-domain-reliability",
    "--disable-extensions",
    "--disable-hang-monitor",
    "--disable-ipc-flooding-protection",
    "--disable-popup-blocking",
    "--disable-prompt-on-repost",
    "--disable-renderer-backgrounding",
    "--disable-speech-api",
    "--disable-sync",
    "--disk-cache-size=0",
    "--mute-audio",
    "--no-first-run",
    "--no-pings",
    "--no-zygote",
]

# Chromium arguments for the unprotected dashboards
BASIC_CHROMIUM_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
]

# Turnstile dashboard (variant A)
TURNSTILE_READY_SELECTOR = ".font-weight-medium"
INTERCEPTED_PARAMS_PREFIX = "intercepted-params:"
TURNSTILE_CALLBACK_NAME = "__turnstileCallback"
TURNSTILE_POLL_INTERVAL_MS = 50

# Counter container dashboard (variant B)
COUNTER_CONTAINER_SELECTOR = "#all"

# Ant Design statistics dashboard (variant C)
ANT_TAB_SELECTOR = "div.ant-tabs-tab"
ANT_ACTIVE_TAB_SELECTOR = "div.ant-tabs-tab-active"
ANT_STATISTIC_SELECTOR = "div.ant-statistic"
ANT_STATISTIC_TITLE_SELECTOR = "div.ant-statistic-title"
ANT_STATISTIC_VALUE_SELECTOR = "span.ant-statistic-content-value-int"

# Heading counter dashboard (variant D)
LOGS_HEADING_SELECTOR = "h6#logs_count"
LOGS_HEADING_PLACEHOLDER = "?"

# Navigation
DEFAULT_WAIT_UNTIL = "domcontentloaded"
