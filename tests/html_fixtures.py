"""Trimmed-down page markup shaped like the live idea pages."""

SLUG = "picklepals-court-matchmaking"

INDEX_HTML = (
    "<html><head><title>Idea of the Day</title>"
    "<script>window.__data = {\"x\": 1};</script></head><body>\n"
    '<a class="nav" href="/pricing">Pricing</a>\n'
    f'<a class="cta" href="/idea/{SLUG}/acp">See the full analysis</a>\n'
    '<h1 class="text-4xl font-bold tracking-tight">PicklePals: Court Matchmaking</h1>\n'
    '<p class="mt-2 text-lg text-gray-600 max-w-3xl">'
    "Find &quot;your&quot; partner &#x27;fast&#x27; &amp; play more.</p>\n"
    '<span class="text-sm">Oct 18, 2026</span>\n'
    '<div class="inline-flex rounded-full bg-blue-100"><span class="px-2">Community</span></div>\n'
    '<div class="inline-flex rounded-full bg-green-100"><span class="px-2">Sports</span></div>\n'
    '<div class="inline-flex rounded-full bg-blue-100"><span class="px-2">Community</span></div>\n'
    "</body></html>"
)

ACP_HTML = (
    "<h1>ACP Framework Analysis</h1>\n"
    '<span class="label">Audience</span><span class="score">8<!-- -->/10</span>\n'
    '<span class="label">Community</span><span class="score">7<!-- -->/10</span>\n'
    '<span class="label">Product</span><span class="score">9<!-- -->/10</span>\n'
    "<h2>AUDIENCE ANALYSIS</h2>"
    '<p class="cap">Demographics</p><p class="val">Adults 30-55, suburban</p>'
    '<p class="cap">Unmet Needs</p><p class="val">Reliable   matchmaking</p>'
    '<p class="cap">Secret Sauce</p><p class="val">Skill-balanced games</p>\n'
    "<h2>COMMUNITY ANALYSIS</h2>"
    '<p class="cap">Primary Platform</p><p class="val">Discord</p>'
    '<p class="cap">UGC Strategy</p><p class="val">Match recaps</p>'
    '<p class="cap">Community Rituals</p><p class="val">Saturday ladders</p>\n'
    "<h2>PRODUCT ANALYSIS</h2>"
    '<p class="cap">Description</p><p class="val">A booking app for open play</p>'
    '<p class="cap">Key Features</p><p class="val">Court finder</p>'
    '<p class="cap">MVP</p><p class="val">Waitlist &amp; SMS</p>'
    '<p class="cap">Usage Frequency</p><p class="val">Weekly</p>\n'
    "<h2>EXECUTION PLAN</h2>"
    '<p class="cap">90-Day Plan</p><p class="val">Launch in two cities</p>'
    "</div></div></div>"
)

VALUE_EQUATION_HTML = (
    "<h1>Value Equation Analysis</h1>\n"
    '<p class="cap">Overall Rating</p><div class="score">7</div>\n'
    '<h1 class="t">Dream Outcome</h1><div class="s">9<!-- -->/10</div>'
    '<p class="text-gray-600">Players get games.</p>\n'
    '<h1 class="t">Perceived Likelihood</h1><div class="s">7<!-- -->/10</div>'
    '<p class="text-gray-600">Proven demand.</p>\n'
    '<h1 class="t">Time Delay</h1><div class="s">8<!-- -->/10</div>'
    '<p class="text-gray-600">Instant booking.</p>\n'
    '<h1 class="t">Effort &amp; Sacrifice</h1><div class="s">6<!-- -->/10</div>'
    '<p class="text-gray-600">Two taps.</p>\n'
)

MARKET_MATRIX_HTML = (
    '<h1 class="t">Market Matrix Analysis</h1><p class="text-gray-600">Strong niche with loyal users.</p>\n'
    '<p class="cap">Uniqueness</p><div class="s">8<!-- -->/10</div>\n'
    '<p class="cap">Value</p><div class="s">9<!-- -->/10</div>\n'
    '<div class="bg-yellow-50 p-4"><div class="x"><h3 class="q">Category King</h3></div></div>\n'
    '<h2>Position Analysis</h2><span class="text-amber-700">Category King</span>'
    '<p class="e">Rare mix of uniqueness and value.</p>\n'
    "<h2>Understanding the Quadrants</h2>"
    "<h1>Category King</h1><p>High value, high uniqueness.</p>"
    "<h1>Low Impact</h1><p>Neither.</p>"
    "</div></div></div>"
)

VALUE_LADDER_HTML = (
    "<h1>Value Ladder Strategy</h1>\n"
    '<div>LEAD MAGNET<h1 class="t">Free Court Guide</h1><span class="bg-blue-50 px-2">Free</span>'
    '<p class="text-gray-600">A PDF of local courts.</p>'
    "<p>Value Provided</p><p>Saves time</p><p>Goal</p><p>Capture emails</p></div>\n"
    '<div>FRONTEND OFFER<h1 class="t">Starter Pass</h1><span class="bg-blue-50">$9</span></div>\n'
    '<div>CORE OFFER<h1 class="t">Pro Membership</h1></div>\n'
    '<div>CONTINUITY PROGRAM<h1 class="t">Club</h1></div>\n'
    '<div>BACKEND OFFER<h1 class="t">Private Coaching</h1><span class="bg-blue-50">$500</span>'
    "</div></div></div>"
)

WHY_NOW_HTML = (
    '<h3 class="font-semibold">Market Timing</h3>\n<p class="v">Pickleball grew 150% in three years</p>\n'
    '<span class="font-medium">Trend</span> <span class="v">Rising</span>\n'
)

PAGES = {
    "idea-of-the-day": INDEX_HTML,
    "acp": ACP_HTML,
    "value-equation": VALUE_EQUATION_HTML,
    "value-matrix": MARKET_MATRIX_HTML,
    "value-ladder": VALUE_LADDER_HTML,
    "build/landing-page": '<h3>Headline</h3><p>Never play alone</p>',
    "founder-fit": '<h3>Ideal Founder</h3><p>Club organizer</p>',
    "why-now": WHY_NOW_HTML,
    "proof-signals": '<h3>Search Volume</h3><p>40k/month</p>',
    "market-gap": '<h3>Gap</h3><p>No skill matching</p>',
    "execution-plan": '<h3>Month 1</h3><p>Recruit 50 players</p>',
}
