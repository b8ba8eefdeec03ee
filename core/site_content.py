# =============================================================================
# core/site_content.py - Marketing and Dashboard Page Content
# =============================================================================
# Static copy for the landing page and builders for the auth and dashboard
# page descriptors. No I/O here: the dashboard builder takes the profile it
# should render.
# =============================================================================

from core.models.auth import AuthMode
from core.models.profile import ProfileResponse
from core.models.site import (
    ActionCard,
    AuthPage,
    DashboardPage,
    Feature,
    FormField,
    LandingPage,
    Link,
    Section,
    Stat,
)

BRAND = "FileAI"
PRODUCT_NAME = "AI Smart File Assistant"

LOGIN_ROUTE = "/auth?mode=login"
SIGNUP_ROUTE = "/auth?mode=signup"

FEATURES = [
    Feature(
        icon="brain",
        title="AI-Powered Analysis",
        description="Advanced machine learning algorithms understand your files contextually, "
                    "extracting insights you never knew existed.",
    ),
    Feature(
        icon="search",
        title="Smart Search",
        description="Find any file instantly using natural language queries. "
                    "Just describe what you're looking for, and we'll find it.",
    ),
    Feature(
        icon="folder-tree",
        title="Intelligent Organization",
        description="Automatically categorize and organize your files based on content, "
                    "making file management effortless.",
    ),
    Feature(
        icon="message-square",
        title="Chat with Your Files",
        description="Ask questions about your documents and get instant, accurate answers powered by AI.",
    ),
    Feature(
        icon="zap",
        title="Lightning Fast",
        description="Powered by vector search technology for instant results, "
                    "no matter how large your file collection.",
    ),
    Feature(
        icon="shield",
        title="Secure & Private",
        description="Your files are encrypted and stored securely. "
                    "We never share your data with third parties.",
    ),
]


def landing_page() -> LandingPage:
    """Content of the marketing page at "/"."""
    return LandingPage(
        brand=BRAND,
        navigation=[
            Link(label="Sign In", href=LOGIN_ROUTE),
            Link(label="Get Started", href=SIGNUP_ROUTE),
        ],
        hero=Section(
            title=PRODUCT_NAME,
            subtitle="Revolutionize how you manage, search, and interact with your files "
                     "using cutting-edge AI technology.",
            actions=[
                Link(label="Get Started Free", href=SIGNUP_ROUTE),
                Link(label="Sign In", href=LOGIN_ROUTE),
            ],
        ),
        stats=[
            Stat(value="10K+", label="Files Processed"),
            Stat(value="99%", label="Accuracy"),
            Stat(value="24/7", label="Available"),
        ],
        features_title="Powerful Features",
        features_subtitle="Everything you need to manage your files smarter, not harder.",
        features=FEATURES,
        call_to_action=Section(
            title="Ready to Transform Your File Management?",
            subtitle="Join thousands of users who are already experiencing the future of file organization.",
            actions=[Link(label="Start Free Today", href=SIGNUP_ROUTE)],
        ),
        footer=f"© 2025 {PRODUCT_NAME}. All rights reserved.",
    )


def auth_page(mode: AuthMode) -> AuthPage:
    """Descriptor of the login or signup form."""
    email = FormField(name="email", type="email", placeholder="Email Address")
    password = FormField(name="password", type="password", placeholder="Password")

    if mode is AuthMode.LOGIN:
        return AuthPage(
            mode=mode,
            title="Welcome Back",
            subtitle="Sign in to access your files",
            submit_label="Sign In",
            fields=[email, password],
            toggle=Link(label="Sign Up", href=SIGNUP_ROUTE),
        )

    return AuthPage(
        mode=mode,
        title="Create Account",
        subtitle="Start your AI-powered file journey",
        submit_label="Create Account",
        fields=[
            FormField(name="first_name", placeholder="First Name"),
            FormField(name="last_name", placeholder="Last Name"),
            email,
            password,
            FormField(name="confirm_password", type="password", placeholder="Confirm Password"),
        ],
        accepts_avatar=True,
        toggle=Link(label="Sign In", href=LOGIN_ROUTE),
    )


def dashboard_page(profile: ProfileResponse | None) -> DashboardPage:
    """
    Dashboard view for a signed-in user.

    A missing profile still renders: names are blank and no index is shown.
    """
    profile = profile or ProfileResponse()
    return DashboardPage(
        greeting=f"Welcome, {profile.first_name or ''}!",
        tagline="Your AI-powered file assistant is ready to help.",
        display_name=profile.display_name,
        avatar_url=profile.avatar_url,
        actions=[
            ActionCard(
                icon="upload",
                title="Upload Files",
                description="Drag and drop or click to upload files for AI processing.",
            ),
            ActionCard(
                icon="folder-open",
                title="Browse Files",
                description="View and manage your uploaded files and AI insights.",
            ),
        ],
        index_active=profile.index_active,
        index_status="Vector Index Active" if profile.index_active else None,
        sign_out=Link(label="Sign Out", href="/api/v1/auth/logout"),
    )
