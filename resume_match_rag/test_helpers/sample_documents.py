"""sample_documents.py
Resume and job description texts to test with.
"""

# Resume / job description pair whose expected extraction and score are known:
#   skills ⊇ {Python, AWS, Docker}, experience_years=5,
#   education=["Bachelor of Science in Computer Science"],
#   required_skills ⊇ {Python, Kubernetes}, experience_required="3+ years experience"
SAMPLE_RESUME_TEXT = """Jane Smith
Senior Software Engineer
Backend developer with 5 years of experience building APIs.
Experience
Lead Engineer at Acme Corp, building Python services on AWS.
Education
Bachelor of Science in Computer Science
Skills
Python, AWS, Docker"""

SAMPLE_JOB_DESCRIPTION_TEXT = """Requirements: Python, Kubernetes
3+ years experience"""

SAMPLE_JOB_DESCRIPTION_WITH_PREFERRED_TEXT = """Backend Engineer
Requirements
Python and SQL
5+ years of experience
Master of Science in Computer Science
Preferred: Docker, Kubernetes
Responsibilities
Build and maintain services"""

# Resume with no recognisable facts at all
UNSTRUCTURED_RESUME_TEXT = """Hello there
I like hiking and cooking.
Available immediately."""
