"""Product summary served at /api/data.

Each key corresponds to a section of the Wise MVP outline. The front end
fetches this object and renders one card per section.
"""
import json
from types import MappingProxyType

API_PATH = "/api/data"

PRODUCT_SUMMARY = MappingProxyType({
    "problem": (
        "Moving money across borders with traditional banks is slow, costly and lacks "
        "transparency. Exchange rates often include hidden mark‑ups and customers "
        "rarely know the full cost upfront."
    ),
    "solution": (
        "Open a single account to hold and convert more than 40 currencies.",
        "Send payments to over 70 countries using the mid‑market rate and low fees.",
        "Spend or withdraw cash in 160+ countries with a Wise card; freeze and unfreeze the card in‑app.",
        "Transfers are protected with two‑factor authentication, encryption and biometrics.",
    ),
    "coreFeatures": (
        "Multi‑currency wallet with instant conversion between 40+ currencies.",
        "Low, transparent transfer fees starting from around 0.43%.",
        "Fast transfers — over 65% arrive in under 20 seconds.",
        "Local account details for 9 currencies so you can get paid like a local.",
        "Wise card for global spending and cash withdrawals with automatic currency conversion.",
        "In‑app dashboard to track balances, transfers and transaction history.",
    ),
    "targetUsers": (
        "Freelancers and remote workers paid in multiple currencies.",
        "Expats and travellers managing money abroad.",
        "Small businesses paying overseas suppliers and contractors.",
        "Individuals sending money to family in other countries.",
    ),
    "valueProposition": (
        "Real mid‑market exchange rates with no hidden mark‑ups.",
        "Faster transfers than traditional banks — many arrive instantly.",
        "Transparent pricing displayed before you send.",
        "Local account details make receiving payments simple and often free.",
        "Regulated money services business, using two‑factor authentication and encryption.",
    ),
    "successMetrics": (
        "Growth in transfer volume and repeat transactions.",
        "Retention of active users and frequency of app usage.",
        "App Store rating (currently 4.7/5 with 91k+ reviews).",
        "Expansion of the customer base (16 million+ users worldwide).",
    ),
    "techStack": (
        "Native apps for iOS and Android devices.",
        "Back‑end integrations with global banking networks and payment rails.",
        "Security features including two‑factor authentication, encryption and biometric logins.",
        "Wise operates as a Money Service Business rather than a bank, safeguarding funds through partner banks.",
    ),
    "monetization": (
        "Small flat fees and a low margin on currency conversion.",
        "Interest on USD balances for eligible US customers.",
    ),
})


def to_json(summary=PRODUCT_SUMMARY):
    # Compact, insertion-ordered, UTF-8 output; same bytes as JSON.stringify
    return json.dumps(dict(summary), ensure_ascii=False, separators=(",", ":"))


PRODUCT_SUMMARY_JSON = to_json().encode("utf-8")
