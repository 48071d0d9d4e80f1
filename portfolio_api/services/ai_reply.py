"""Reply drafting through the OpenRouter chat-completions API."""

import logging

import httpx

from portfolio_api.config import settings
from portfolio_api.models.contact import Contact

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a professional assistant helping write polite and helpful "
    "business replies to clients."
)


class AIReplyError(Exception):
    """Raised when a draft could not be produced."""


def build_prompt(contact: Contact) -> str:
    """Describe the enquiry for the model."""
    return (
        f"Client Name: {contact.name}\n"
        f"Subject: {contact.subject or 'Not specified'}\n"
        f"Project Type: {contact.project_type or 'Not specified'}\n"
        f"Company: {contact.company or 'Not specified'}\n"
        f"Budget: {contact.budget or 'Not specified'}\n"
        f"Message: {contact.message}\n\n"
        "Please write a polite, professional reply thanking the client and "
        "offering to discuss the project further. Focus on providing a "
        "comprehensive draft that can be sent directly or with minor edits."
    )


async def generate_reply(prompt: str) -> str:
    """Ask the model for a reply draft.

    Raises:
        AIReplyError: If no API key is configured, the request fails, or the
            response carries no text.
    """
    if not settings.OPENROUTER_API_KEY:
        raise AIReplyError("OpenRouter API key is not configured")

    payload = {
        "model": settings.OPENROUTER_MODEL,
        "temperature": 0.7,
        "max_tokens": 1000,
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ],
    }
    headers = {"Authorization": f"Bearer {settings.OPENROUTER_API_KEY}"}

    try:
        async with httpx.AsyncClient(timeout=settings.OPENROUTER_TIMEOUT) as client:
            response = await client.post(settings.OPENROUTER_URL, json=payload, headers=headers)
            response.raise_for_status()
        content = response.json()["choices"][0]["message"]["content"]
    except (httpx.HTTPError, KeyError, IndexError, TypeError, ValueError) as e:
        raise AIReplyError(f"AI reply generation failed: {e}") from e

    if not isinstance(content, str) or not content.strip():
        raise AIReplyError("Model returned an empty reply")
    return content.strip()
