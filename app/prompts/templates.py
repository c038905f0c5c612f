CONNECTION_AWARE_PROMPT = """You are writing a personalized cold email for LinkedIn outreach.

ABOUT THE SENDER:
- Name: {sender_name}
- Current Role: {sender_current_role}
- Looking for: {sender_target_roles}
- Background: {sender_about_me}

RECIPIENT'S LINKEDIN PROFILE:
{recipient_profile}

INSTRUCTIONS:
First, identify any genuine connections between the sender and recipient:
- Same companies (past or present)
- Similar educational background
- Overlapping skills or technologies
- Same industry or domain
- Similar career trajectory
- Shared interests or achievements

Then write an email following this structure:

1. OPENING: Greet them and mention what caught your attention about their profile. If there's a genuine connection (same school, company, skill), mention it naturally here. (2-3 sentences)

2. YOUR BACKGROUND: Briefly introduce yourself using the sender's background. Highlight any relevant overlap with the recipient. (1-2 sentences)

3. THE ASK: Mention they've already achieved what you're working towards and that a conversation would help you learn from their experience. (2 sentences)

4. CALL TO ACTION: Request a 15-minute call at their convenience.

Make it:
- Conversational and genuine (not formal or stiff)
- Specific to their actual experience from their profile
- Highlight genuine connections naturally (don't force it if none exist)
- Keep it concise (under 150 words)
- DO NOT include a subject line or any preamble, just the email body
- Sign off with the sender's first name ({sender_first_name})

Write only the email body:"""

GENERIC_OPENING_PROMPT = """You are writing a personalized cold email for LinkedIn outreach. Based on the profile information below, write an email following this exact structure:

1. OPENING: Start with greeting and mention what caught your attention about their profile (2-3 sentences, be specific about their experience/achievements)

2. YOUR BACKGROUND: Briefly mention you have relevant background and are in early stage of your journey/career/project (1-2 sentences)

3. THE ASK: Mention they've already achieved what you're working towards and that having a conversation would be really helpful to learn from their decisions and experience (2 sentences)

4. CALL TO ACTION: Request a 15-minute call next week at their convenience

Make it:
- Conversational and genuine (not overly formal)
- Specific to their actual experience/role/achievements from their profile
- Show you've read their profile carefully
- Keep it concise (under 150 words total)
- DO NOT include a subject line or any preamble, just the email body
- Use their name if available

LinkedIn Profile Data:
{recipient_profile}

Write only the email body:"""

MINIMAL_PROMPT = """You are writing a short, direct cold email requesting a job referral.

ABOUT THE SENDER:
- Name: {sender_name}
- Current Role: {sender_current_role}
- Background/Skills: {sender_about_me}

RECIPIENT'S LINKEDIN PROFILE:
{recipient_profile}

INSTRUCTIONS:
Write a very short referral request email (under 80 words):

1. One line: Mention you found a specific role at their company (extract company from their profile) and you're interested
2. One line: Briefly state your relevant experience (years + key tech/skills)
3. One line: Ask directly if they'd be open to referring you, offer to send resume
4. One line: Thank them either way
5. Sign off with sender's first name ({sender_first_name})

Make it:
- Very concise and direct
- Respectful of their time
- No fluff or excessive flattery
- Professional but friendly
- DO NOT include a subject line or any preamble, just the email body

Write only the email body:"""

ABOUT_THEM_PROMPT = """You are writing a cold email focused entirely on the recipient and learning from them.

ABOUT THE SENDER:
- Name: {sender_name}
- Current Role: {sender_current_role}
- Looking for: {sender_target_roles}

RECIPIENT'S LINKEDIN PROFILE:
{recipient_profile}

INSTRUCTIONS:
Write an email that makes it ALL about them (under 120 words):

1. OPENING: Mention 2-3 specific things that impressed you about their career/achievements (be very specific from their profile)

2. GENUINE INTEREST: Express that you'd love to learn more about their journey - pick something specific like:
   - How they transitioned into their current role
   - How they developed expertise in X
   - Their experience at [specific company]
   - A decision they made in their career

3. SOFT ASK: Say you'd love to connect and hear their perspective, no pressure

4. Sign off warmly with sender's first name ({sender_first_name})

Make it:
- Entirely focused on them, not about asking for anything
- Genuinely curious and admiring
- Specific to their actual profile (not generic)
- No mention of job hunting or referrals
- DO NOT include a subject line or any preamble, just the email body

Write only the email body:"""

CUSTOM_PROMPT = """You are writing a cold email based on custom instructions.

ABOUT THE SENDER:
- Name: {sender_name}
- Current Role: {sender_current_role}
- Background: {sender_about_me}

RECIPIENT'S LINKEDIN PROFILE:
{recipient_profile}

USER'S CUSTOM INSTRUCTIONS:
{custom_instructions}

Based on the above information and custom instructions, write the email.
Sign off with the sender's first name ({sender_first_name}).
DO NOT include a subject line or any preamble, just the email body.

Write only the email body:"""
