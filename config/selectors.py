"""CSS selectors for the LinkedIn profile page.

LinkedIn ships hashed utility classes, so the mandatory nodes are matched on
class substrings rather than exact class names.
"""

NAME_SELECTOR = (
    'h1[class*="inline"][class*="t-24"][class*="v-align-middle"][class*="break-words"]'
)
TITLE_SELECTOR = 'div[class*="text-body-medium"][class*="break-words"]'

EDUCATION_ANCHOR = "div#education.pv-profile-card__anchor"
EXPERIENCE_ANCHOR = (
    "div#experience.pv-profile-card__anchor, section#experience.pv-profile-card__anchor"
)
# The card <section> wrapping each anchor
PROFILE_CARD_SECTION = 'section[data-view-name="profile-card"]'

SUMMARY_MARKER_CLASS = "ai-profile-summary"
SUMMARY_MARKER_SELECTOR = f".{SUMMARY_MARKER_CLASS}"
