# =============================================================================
# core/models/site.py - Page Schemas
# =============================================================================
# View models for the three client-visible routes:
# - LandingPage: "/" (hero, features, call to action)
# - AuthPage: "/auth?mode=login|signup"
# - DashboardPage: "/dashboard"
# =============================================================================

from pydantic import BaseModel, Field

from .auth import AuthMode


class Link(BaseModel):
    label: str
    href: str


class Stat(BaseModel):
    value: str
    label: str


class Feature(BaseModel):
    icon: str
    title: str
    description: str


class Section(BaseModel):
    title: str
    subtitle: str
    actions: list[Link] = Field(default_factory=list)


class LandingPage(BaseModel):
    """Marketing page content."""

    brand: str
    navigation: list[Link]
    hero: Section
    stats: list[Stat]
    features_title: str
    features_subtitle: str
    features: list[Feature]
    call_to_action: Section
    footer: str


class FormField(BaseModel):
    name: str
    type: str = "text"
    placeholder: str


class AuthPage(BaseModel):
    """Descriptor of the login or signup form."""

    mode: AuthMode
    title: str
    subtitle: str
    submit_label: str
    fields: list[FormField]
    accepts_avatar: bool = False
    toggle: Link


class ActionCard(BaseModel):
    icon: str
    title: str
    description: str


class DashboardPage(BaseModel):
    """What a signed-in user sees."""

    greeting: str
    tagline: str
    display_name: str
    avatar_url: str | None = None
    actions: list[ActionCard]
    index_active: bool = False
    index_status: str | None = None
    sign_out: Link
