"""Prompt templates for the marketplace assistant.

Every template asks for a bare JSON object and spells out the expected keys;
the extractor still tolerates replies that ignore the instruction.
"""

SEARCH_INTENT_PROMPT = """Analyze this product search query and extract structured information:
Query: "{query}"

Return ONLY a valid JSON object (no markdown, no extra text) with these fields:
{{
  "keywords": ["list", "of", "search", "terms"],
  "category": "category name or null",
  "priceContext": "low/medium/high/budget/premium or null",
  "condition": "new/used/refurbished or null",
  "intent": "brief description of what user wants"
}}

Example response format:
{{"keywords":["cheap","phone"],"category":"Electronics","priceContext":"budget","condition":null,"intent":"Looking for affordable smartphones"}}
"""

PRICE_SUGGESTION_PROMPT = """Analyze this product and suggest an optimal selling price based on market data.

Product Information:
- Title: "{title}"
- Category: "{category}"
- Condition: "{condition}"
- Description: "{description}"

Similar Products Sold Recently:
{comparables}

Return ONLY a valid JSON object (no markdown, no extra text) with:
{{
  "suggestedPrice": <number>,
  "minPrice": <number>,
  "maxPrice": <number>,
  "reasoning": "brief explanation",
  "confidence": "high/medium/low"
}}

minPrice <= suggestedPrice <= maxPrice must hold.

Example:
{{"suggestedPrice":45000,"minPrice":42000,"maxPrice":48000,"reasoning":"Based on 3 recently sold items with similar condition","confidence":"high"}}
"""

LISTING_ENHANCEMENT_PROMPT = """Improve this product listing for better discoverability:
Title: "{title}"
Description: "{description}"

Return ONLY a valid JSON object (no markdown) with:
{{
  "improvedTitle": "better title",
  "improvedDescription": "enhanced description",
  "suggestedKeywords": ["keyword1", "keyword2"]
}}

Keep it concise and SEO-friendly.
"""

COMPARABLE_LINE = "{index}. {title} - Price: {price}, Condition: {condition}, Sold: {sold}"


def format_price(price: float) -> str:
    # 120.0 -> "120", 99.5 -> "99.5"
    price = float(price)
    return str(int(price)) if price.is_integer() else str(price)


def format_comparables(comparables) -> str:
    return "\n".join(
        COMPARABLE_LINE.format(
            index=i,
            title=c.title,
            price=format_price(c.price),
            condition=c.condition or "unspecified",
            sold=str(c.sold).lower(),
        )
        for i, c in enumerate(comparables, start=1)
    )


def search_intent_prompt(query: str) -> str:
    return SEARCH_INTENT_PROMPT.format(query=query)


def price_suggestion_prompt(draft, comparables) -> str:
    return PRICE_SUGGESTION_PROMPT.format(
        title=draft.title,
        category=draft.category or "unspecified",
        condition=draft.condition or "unspecified",
        description=draft.description or "",
        comparables=format_comparables(comparables),
    )


def listing_enhancement_prompt(title: str, description: str) -> str:
    return LISTING_ENHANCEMENT_PROMPT.format(title=title, description=description or "")
