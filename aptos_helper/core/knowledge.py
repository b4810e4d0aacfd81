"""
Knowledge responder: answers free-text questions from a static knowledge base.

Lookup order:
- KNOWLEDGE_BASE: categories in order, phrases in insertion order
- build_hint_routes(): keyword hints for help, balance and faucet questions
- FALLBACK_RESPONSE: generic suggestions
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class KnowledgeEntry:
    """A canned answer keyed by a short phrase."""

    phrase: str
    answer: str

    @property
    def words(self) -> tuple[str, ...]:
        return tuple(self.phrase.split(" "))

    def matches(self, message: str) -> bool:
        """Match on the whole phrase or any single word of it."""
        return self.phrase in message or any(word in message for word in self.words)


@dataclass(frozen=True)
class KnowledgeCategory:
    """An ordered group of knowledge entries."""

    name: str
    entries: tuple[KnowledgeEntry, ...]


KNOWLEDGE_BASE: tuple[KnowledgeCategory, ...] = (
    KnowledgeCategory(
        name="basics",
        entries=(
            KnowledgeEntry(
                "what is aptos",
                "Aptos is a Layer 1 blockchain focused on safety, scalability, and usability. "
                "Built by former Meta engineers, it uses the Move programming language and "
                "offers parallel execution for high throughput.",
            ),
            KnowledgeEntry(
                "move language",
                "Move is a programming language designed for safe and flexible management of "
                "digital assets. It prevents common smart contract vulnerabilities and makes "
                "it easier to write secure code.",
            ),
            KnowledgeEntry(
                "aptos features",
                "Key features include parallel execution (up to 160,000 TPS), low gas fees, "
                "developer-friendly tools, and built-in safety mechanisms.",
            ),
        ),
    ),
    KnowledgeCategory(
        name="projects",
        entries=(
            KnowledgeEntry(
                "popular dapps",
                "Popular Aptos projects include Thala Protocol (DEX/lending), Chingari "
                "(social media), Petra Wallet, Pontem Network, and Aries Markets.",
            ),
            KnowledgeEntry(
                "defi projects",
                "Major DeFi projects: Thala Protocol, Aries Markets, Hippo Labs, "
                "Pancake Swap on Aptos, and Liquidswap.",
            ),
            KnowledgeEntry(
                "nft projects",
                "NFT platforms include Topaz, Souffl3, and BlueMove marketplace.",
            ),
        ),
    ),
    KnowledgeCategory(
        name="development",
        entries=(
            KnowledgeEntry(
                "getting started",
                "Start with the Aptos CLI, create a wallet using Petra, get testnet tokens "
                "from the faucet, and try the Move tutorial.",
            ),
            KnowledgeEntry(
                "tools",
                "Essential tools: Aptos CLI, Move IDE, Petra Wallet, TypeScript/Python SDK, "
                "and the Aptos Explorer.",
            ),
        ),
    ),
)

FOLLOW_UP_PROMPT = "Would you like to know more about anything specific?"

WELCOME_RESPONSE = (
    "👋 Welcome to the Aptos Community Helper Bot!\n\n"
    "I can help you with:\n"
    "• Aptos basics and concepts\n"
    "• Checking wallet balances\n"
    "• Finding testnet faucets\n"
    "• Learning about popular projects\n"
    "• Development resources\n\n"
    "Just ask me anything about Aptos!"
)

BALANCE_USAGE_RESPONSE = (
    "💰 To check your wallet balance, use:\n"
    "/balance <your-address>\n\n"
    "Example:\n"
    "/balance 0x123...abc"
)

FAUCET_RESPONSE = (
    "🚰 Get testnet APT tokens from the official faucet:\n"
    "{faucet_url}\n\n"
    "You'll need a testnet wallet address. Use Petra Wallet to create one!"
)

FALLBACK_RESPONSE = (
    "🤔 I'm not sure about that, but I'm here to help with Aptos-related questions!\n\n"
    "Try asking about:\n"
    "• Aptos basics\n"
    "• DeFi projects\n"
    "• Development tools\n"
    "• Wallet help\n\n"
    "Or use /help to see all commands."
)

DEFAULT_FAUCET_URL = "https://aptoslabs.com/testnet-faucet"


def build_hint_routes(faucet_url: str = DEFAULT_FAUCET_URL) -> list[tuple[tuple[str, ...], str]]:
    """Keyword hints checked when no knowledge entry matches.

    Format: (keywords, response)
    """
    return [
        (("help", "start"), WELCOME_RESPONSE),
        (("balance", "wallet"), BALANCE_USAGE_RESPONSE),
        (("faucet", "testnet"), FAUCET_RESPONSE.format(faucet_url=faucet_url)),
    ]


class KnowledgeResponder:
    """Generates replies for free-text messages."""

    def __init__(
        self,
        knowledge_base: Optional[tuple[KnowledgeCategory, ...]] = None,
        hint_routes: Optional[list[tuple[tuple[str, ...], str]]] = None,
        fallback: str = FALLBACK_RESPONSE,
        faucet_url: str = DEFAULT_FAUCET_URL,
    ):
        """Initialize responder with optional custom tables."""
        self.knowledge_base = knowledge_base if knowledge_base is not None else KNOWLEDGE_BASE
        self.hint_routes = (
            hint_routes if hint_routes is not None else build_hint_routes(faucet_url)
        )
        self.fallback = fallback

    def find_entry(self, message: str) -> Optional[KnowledgeEntry]:
        """Return the first entry matching the lowercased *message*, if any."""
        for category in self.knowledge_base:
            for entry in category.entries:
                if entry.matches(message):
                    return entry
        return None

    def generate_response(self, user_message: str) -> str:
        """
        Build a reply for a free-text message.

        Args:
            user_message: Raw text typed by the user

        Returns:
            Knowledge answer, keyword hint, or the generic fallback
        """
        message = user_message.lower()

        entry = self.find_entry(message)
        if entry is not None:
            return f"🤖 {entry.answer}\n\n{FOLLOW_UP_PROMPT}"

        for keywords, response in self.hint_routes:
            if any(keyword in message for keyword in keywords):
                return response

        return self.fallback
