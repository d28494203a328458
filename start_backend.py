#!/usr/bin/env python3
"""
Startup script for the Prompt Assistant back-end
"""

import sys

from app import app
from prompting.config import config


def check_providers():
    """Report which providers have API keys configured"""
    status = config.get_provider_status()
    for provider, configured in status.items():
        if configured:
            print(f"✅ {provider} API key is set")
        else:
            print(f"⚠️  {provider} API key is not set")

    if not config.provider_configured(config.default_provider):
        print(f"❌ Default provider '{config.default_provider}' has no API key!")
        print("💡 Set GEMINI_API_KEY or OPENROUTER_API_KEY in .env,")
        print("   or point DEFAULT_PROVIDER at a configured provider.")
        return False
    return True


def main():
    print("🚀 Starting Prompt Assistant Backend...")
    print("=" * 50)

    if not check_providers():
        print("\n⚠️  Requests will fail with provider_unavailable until a key is set.")

    print("\n" + "=" * 50)
    print("🌐 Starting Flask server...")
    print(f"📖 Health check: http://localhost:{config.port}/api/health")
    print("=" * 50)

    try:
        app.run(host="0.0.0.0", port=config.port)
    except KeyboardInterrupt:
        print("\n🛑 Server stopped by user.")
    except Exception as e:
        print(f"\n❌ Error starting server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
