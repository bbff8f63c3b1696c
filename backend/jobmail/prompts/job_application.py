"""
Job Application Email Prompt

Wraps a template instruction around the job description and optional
candidate details. The model is asked for plain text, not JSON: the reply
is shown to the user as-is.
"""

USER_PROMPT_TEMPLATE = """{template_prompt}

JOB DESCRIPTION:
{job_description}

{candidate_section}

Please generate a complete email with:
1. A compelling subject line
2. Professional salutation
3. Structured body paragraphs that:
   - Express interest in the position
   - Highlight relevant skills and experience
   - Show knowledge of the company (if implied in job description)
   - Connect candidate's qualifications to job requirements
4. Professional closing with call to action
5. Appropriate signature

Make the email personalized, professional, and tailored to the specific job description.
Format the response as a ready-to-use email."""

CANDIDATE_SECTION_TEMPLATE = """CANDIDATE INFORMATION TO INCORPORATE:
{user_details}"""
