"""Shared constants for the order-intent parser.

Canonical slugs are the only values a keyword dictionary may map to.
Centralizes string literals to prevent typos in dictionaries and callers.
"""

# Platform slugs (match category slugs in the service catalog)
PLATFORM_INSTAGRAM: str = "instagram"
PLATFORM_TIKTOK: str = "tiktok"
PLATFORM_TWITTER: str = "twitter"
PLATFORM_YOUTUBE: str = "youtube"
PLATFORM_SNAPCHAT: str = "snapchat"
PLATFORM_FACEBOOK: str = "facebook"
PLATFORM_DISCORD: str = "discord"
PLATFORM_LINKEDIN: str = "linkedin"

PLATFORM_SLUGS: frozenset[str] = frozenset(
    {
        PLATFORM_INSTAGRAM,
        PLATFORM_TIKTOK,
        PLATFORM_TWITTER,
        PLATFORM_YOUTUBE,
        PLATFORM_SNAPCHAT,
        PLATFORM_FACEBOOK,
        PLATFORM_DISCORD,
        PLATFORM_LINKEDIN,
    }
)

# Service type slugs (match service type slugs in the service catalog)
SERVICE_FOLLOWERS: str = "followers"
SERVICE_LIKES: str = "likes"
SERVICE_COMMENTS: str = "comments"
SERVICE_VIEWS: str = "views"
SERVICE_SUBSCRIBERS: str = "subscribers"
SERVICE_SHARES: str = "shares"
SERVICE_RETWEETS: str = "retweets"
SERVICE_CONNECTIONS: str = "connections"
SERVICE_REPOSTS: str = "reposts"
SERVICE_COMPANY_FOLLOWERS: str = "company-followers"

SERVICE_TYPE_SLUGS: frozenset[str] = frozenset(
    {
        SERVICE_FOLLOWERS,
        SERVICE_LIKES,
        SERVICE_COMMENTS,
        SERVICE_VIEWS,
        SERVICE_SUBSCRIBERS,
        SERVICE_SHARES,
        SERVICE_RETWEETS,
        SERVICE_CONNECTIONS,
        SERVICE_REPOSTS,
        SERVICE_COMPANY_FOLLOWERS,
    }
)

# Human-readable labels (English UI)
PLATFORM_LABELS: dict[str, str] = {
    PLATFORM_INSTAGRAM: "INSTAGRAM",
    PLATFORM_TIKTOK: "TIKTOK",
    PLATFORM_TWITTER: "TWITTER/X",
    PLATFORM_YOUTUBE: "YOUTUBE",
    PLATFORM_SNAPCHAT: "SNAPCHAT",
    PLATFORM_FACEBOOK: "FACEBOOK",
    PLATFORM_DISCORD: "DISCORD",
    PLATFORM_LINKEDIN: "LINKEDIN",
}

SERVICE_TYPE_LABELS: dict[str, str] = {
    SERVICE_FOLLOWERS: "Followers",
    SERVICE_LIKES: "Likes",
    SERVICE_COMMENTS: "Comments",
    SERVICE_VIEWS: "Views",
    SERVICE_SUBSCRIBERS: "Subscribers",
    SERVICE_SHARES: "Shares",
    SERVICE_RETWEETS: "Retweets",
    SERVICE_CONNECTIONS: "Connections",
    SERVICE_REPOSTS: "Reposts",
    SERVICE_COMPANY_FOLLOWERS: "Company Followers",
}

# Domain names accepted by the display-name resolver
DOMAIN_PLATFORM: str = "platform"
DOMAIN_SERVICE_TYPE: str = "service_type"

# Preview gate (percentage points)
DEFAULT_PREVIEW_THRESHOLD: int = 50
