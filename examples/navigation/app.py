"""Navigation: page routing for a single-page app shell.

Demonstrates literal routes, pattern routes, literal-over-pattern
precedence, and how the caller decides what a miss means.

Run:
    python app.py /user/42/settings
    wayfinder routes app
"""

import sys

from wayfinder import NOT_FOUND, Router, zero_factory


class Page:
    title = "Page"

    def render(self) -> str:
        return f"<h1>{self.title}</h1>"


class HomePage(Page):
    title = "Home"


class AboutPage(Page):
    title = "About"


class SettingsPage(Page):
    title = "Settings"


class ColorPage(Page):
    title = "Color"


class MissingPage(Page):
    title = "Not found"


router = Router()
router.route("/", HomePage)
router.route("/about", AboutPage)
router.route("/user/me/settings", zero_factory(AboutPage()), name="own_settings")
router.route_pattern(r"^/user/.*/settings$", SettingsPage, name="user_settings")
router.route_pattern(r"^/color/(red|green|blue)$", ColorPage)


def navigate(path: str) -> Page:
    """Return the page for *path*, falling back to ``MissingPage``."""
    page = router.resolve(path)
    if page is NOT_FOUND:
        return MissingPage()
    return page


if __name__ == "__main__":
    for arg in sys.argv[1:] or ["/"]:
        print(navigate(arg).render())
