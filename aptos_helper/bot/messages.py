"""Reply templates for bot commands."""

WELCOME_MESSAGE = (
    "🚀 Welcome to the Aptos Community Helper Bot!\n\n"
    "I'm your AI assistant for everything Aptos blockchain.\n\n"
    "🔧 Available Commands:\n"
    "/help - Show all commands\n"
    "/balance <address> - Check APT balance\n"
    "/faucet - Get testnet tokens\n"
    "/learn - Educational resources\n\n"
    "💬 You can also just chat with me about Aptos!"
)

HELP_MESSAGE = (
    "📚 Aptos Helper Bot Commands:\n\n"
    "/start - Welcome message\n"
    "/help - This help menu\n"
    "/balance <address> - Check wallet balance\n"
    "/faucet - Testnet faucet links\n"
    "/learn - Learning resources\n\n"
    "💡 Pro Tips:\n"
    "• Ask me about Aptos concepts\n"
    "• Get info on DeFi projects\n"
    "• Learn about Move programming\n"
    "• Find development tools\n\n"
    "Just type your question naturally!"
)

FAUCET_MESSAGE = (
    "🚰 **Aptos Testnet Faucet**\n\n"
    "💧 Get free testnet APT tokens:\n"
    "🔗 [Official Faucet]({faucet_url})\n\n"
    "📝 **How to use:**\n"
    "1. Create a wallet with Petra\n"
    "2. Copy your testnet address\n"
    "3. Paste it in the faucet\n"
    "4. Get 100 APT tokens!\n\n"
    "🔄 You can request tokens every hour."
)

LEARN_MESSAGE = (
    "📚 **Aptos Learning Resources**\n\n"
    "🎯 **For Beginners:**\n"
    "• [Aptos Documentation](https://aptos.dev/)\n"
    "• [Move Language Guide](https://move-language.github.io/move/)\n"
    "• [Petra Wallet Setup](https://petra.app/)\n\n"
    "🔨 **For Developers:**\n"
    "• [Aptos CLI Installation](https://aptos.dev/cli-tools/aptos-cli-tool/install-aptos-cli)\n"
    "• [TypeScript SDK](https://github.com/aptos-labs/aptos-core/tree/main/ecosystem/typescript/sdk)\n"
    "• [Move Tutorial](https://aptos.dev/tutorials/first-move-module)\n\n"
    "🏗️ **Popular Projects:**\n"
    "• Thala Protocol (DeFi)\n"
    "• Chingari (Social)\n"
    "• Aries Markets (Lending)\n\n"
    "Ask me about any of these topics!"
)

INVALID_ADDRESS_MESSAGE = "❌ Invalid Aptos address format.\n\nExample: /balance 0x123...abc"

CHECKING_BALANCE_MESSAGE = "🔍 Checking balance..."

BALANCE_MESSAGE = (
    "💰 **Balance Information**\n\n"
    "🏦 Address: `{address}`\n"
    "💎 Balance: **{balance} APT**\n"
    "🌐 Network: {network}\n\n"
    "📊 [View on Explorer]({explorer_url})"
)

BALANCE_ERROR_MESSAGE = "❌ {error}\n\nMake sure the address is correct and has been funded."

BALANCE_FAILURE_MESSAGE = "🚨 Error checking balance. Please try again later."

RATE_LIMITED_MESSAGE = "⏰ Please wait {seconds:g} seconds between messages."

RESPONDER_FAILURE_MESSAGE = (
    "🤖 Sorry, I had trouble processing that. Try asking about Aptos, DeFi, or development!"
)
