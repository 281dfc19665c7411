# Constants
PAGE_METADATA = {
    "title": "Foresyte - AI News Feed for Prediction Markets",
    "description": "AI-powered curated news feed designed specifically for prediction market traders",
    "brand": "FORESYTE",
    "badge": "[COMING SOON]",
    "headline": "THE AI NEWS FEED",
    "subheadline": "BUILT FOR PREDICTION MARKETS",
    "features_heading": "FOR TRADERS WHO DEMAND THE EDGE",
    "copyright": "2025 FORESYTE. ALL RIGHTS RESERVED.",
}

SYSTEM_INFO = [
    "AI-powered curated news feed designed specifically for prediction market traders.",
    "Not traditional news, content optimized for quick and accurate decisions.",
]

FEATURES = [
    {
        "title": "Predictor-Optimized Format",
        "description": "News presented in a format designed for predictors. Structured to help you make decisions quickly and accurately."
    },
    {
        "title": "Market Impact Indicators",
        "description": "Visual indicators show how news affects markets. Instantly see which stories move odds and by how much."
    },
    {
        "title": "Actionable Information Layout",
        "description": "Information structured for prediction decisions. Key facts upfront, relevant markets linked, probabilities highlighted."
    },
    {
        "title": "Breaking News Alerts",
        "description": "Instant notifications when news breaks. Formatted to show market impact potential before you even read."
    },
    {
        "title": "AI-Enhanced Presentation",
        "description": "AI formats news insights in predictor-friendly layouts. Key data extracted, markets connected, context provided."
    },
    {
        "title": "Real-Time Aggregated Feed",
        "description": "All news in one unified format across Polymarket, Manifold, Kalshi, and beyond. Consistent, usable, focused."
    },
]

MARKET_CATEGORIES = [
    "Politics", "Sports", "Finance", "Crypto", "Geopolitics", "Earnings",
    "Tech", "Culture", "World", "Economy", "Elections", "Mentions",
]

FORM_COPY = {
    "email_label": "Email Address *",
    "email_placeholder": "trader@example.com",
    "features_label": "What features do you want to see? (Optional)",
    "features_placeholder": "Tell us what features matter most to you...",
    "features_hint": "Your input helps us prioritize development",
    "open_dialog": "JOIN_WAITLIST",
    "submit_idle": "JOIN THE WAITLIST",
    "submit_busy": "JOINING...",
    "confirmation_title": "You're on the list!",
    "confirmation_body": "We'll notify you when Foresyte launches. Get ready to dominate prediction markets.",
    "consent": "By joining, you agree to receive updates about Foresyte. Unsubscribe anytime.",
}
