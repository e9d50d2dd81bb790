"""Reddit wiki client used to read the sidebar template and publish it.

Authenticates as a script application through praw and reads or edits
pages of one subreddit's wiki.
"""

import logging

import praw
from praw.exceptions import PRAWException
from prawcore.exceptions import PrawcoreException

from config.constants import REDDIT_TIMEOUT, USER_AGENT
from core.exceptions import PublishError

logger = logging.getLogger(__name__)

REDDIT_ERRORS = (PRAWException, PrawcoreException)


class RedditClient:
    """Client for a subreddit's wiki pages."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        username: str,
        password: str,
        subreddit: str,
        timeout: float = REDDIT_TIMEOUT,
    ):
        self.subreddit = subreddit
        self.reddit = praw.Reddit(
            client_id=client_id,
            client_secret=client_secret,
            username=username,
            password=password,
            user_agent=USER_AGENT,
            timeout=timeout,
        )

    def _wiki_page(self, page: str):
        return self.reddit.subreddit(self.subreddit).wiki[page]

    def get_wiki_page(self, page: str) -> str:
        """Read the markdown of a wiki page.

        Args:
            page: Wiki page name, e.g. "sidebar_template".

        Returns:
            Page markdown.

        Raises:
            PublishError: If the page cannot be read.
        """
        try:
            content = self._wiki_page(page).content_md
        except REDDIT_ERRORS as e:
            raise PublishError(f"Reading wiki page {page} failed: {e}") from e

        if not isinstance(content, str):
            raise PublishError(f"Wiki page {page} has no content")

        logger.info(
            f"Read wiki page {page} ({len(content)} chars)",
            extra={"subreddit": self.subreddit, "page": page},
        )
        return content

    def edit_wiki_page(self, page: str, content: str, reason: str) -> None:
        """Replace the markdown of a wiki page.

        Args:
            page: Wiki page name, e.g. "config/sidebar".
            content: New page markdown.
            reason: Revision reason shown in the page history.

        Raises:
            PublishError: If the page cannot be written.
        """
        try:
            self._wiki_page(page).edit(content=content, reason=reason)
        except REDDIT_ERRORS as e:
            raise PublishError(f"Editing wiki page {page} failed: {e}") from e

        logger.info(
            f"Updated wiki page {page}",
            extra={"subreddit": self.subreddit, "page": page},
        )
