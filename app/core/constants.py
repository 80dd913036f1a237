"""Core constants: OAuth provider allowlists and default-permission literals.

Single source of truth for which provider ids may be configured with the
shared credential pool and which accept tenant credentials.
"""

# Providers the platform holds shared (proxied) credentials for.
SHARED_OAUTH_PROVIDERS: frozenset[str] = frozenset(
    {"github", "google", "microsoft", "spotify"}
)

# Providers a tenant may configure with its own client id/secret.
STANDARD_OAUTH_PROVIDERS: frozenset[str] = frozenset(
    {
        "apple",
        "bitbucket",
        "discord",
        "facebook",
        "github",
        "gitlab",
        "google",
        "linkedin",
        "microsoft",
        "spotify",
        "x",
    }
)

DEFAULT_TEAM_MEMBER_PERMISSION_ID = "member"
DEFAULT_TEAM_CREATOR_PERMISSION_ID = "admin"
