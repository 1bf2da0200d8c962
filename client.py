import argparse
import logging
import os
import sys

import requests

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
logger = logging.getLogger(__name__)

# --- Client configuration ---
API_BASE_URL = os.getenv("UNSAID_API_URL", "http://localhost:5000/api")
TIMEOUT = 60


def translate_emotion(text, session_id="default", base_url=API_BASE_URL):
    response = requests.post(f"{base_url}/translate", json={"text": text, "sessionId": session_id}, timeout=TIMEOUT)
    response.raise_for_status()
    return response.json()


def get_translation_history(session_id="default", base_url=API_BASE_URL):
    response = requests.get(f"{base_url}/history", params={"sessionId": session_id}, timeout=TIMEOUT)
    response.raise_for_status()
    return response.json()


def print_translation(data):
    tr = data["translation"]
    print(f"{tr['validationIcon']}  {tr['validation']}")
    print(f"  Clear:       {tr['clearExpression']}")
    print(f"  Respectful:  {tr['respectfulExpression']}")
    print(f"  Emotions:    {', '.join(tr['emotions'])}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Send emotional text to an UNSAID server.")
    parser.add_argument("text", nargs="?", help="what you want to say")
    parser.add_argument("--session", default="default", help="session id used to group history")
    parser.add_argument("--history", action="store_true", help="print this session's history instead")
    parser.add_argument("--url", default=API_BASE_URL, help="API base url")
    args = parser.parse_args(argv)

    try:
        if args.history:
            for item in get_translation_history(args.session, args.url)["translations"]:
                print(f"[{item['timestamp']}] {item['rawText']}")
                print(f"  -> {item['clearExpression']}")
            return 0

        if not args.text:
            parser.error("text is required unless --history is given")
        print_translation(translate_emotion(args.text, args.session, args.url))
        return 0
    except requests.HTTPError as e:
        logger.error("Server rejected the request: %s", e.response.text if e.response is not None else e)
    except requests.RequestException as e:
        logger.error("Could not reach %s: %s", args.url, e)
    return 1


if __name__ == "__main__":
    sys.exit(main())
