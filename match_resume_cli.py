"""match_resume_cli.py
Score a resume against a job description from the command line and
optionally ask grounded questions about the candidate.
Example: `python match_resume_cli.py path/to/resume.pdf path/to/job.txt "Does she know AWS?"`
"""
import asyncio
import sys

from resume_match_rag.rag_classes.answering.grounded_answering_pipeline import GroundedAnsweringPipeline
from resume_match_rag.rag_classes.file_parser.document_loader import load_document_text
from resume_match_rag.rag_classes.session.session_service import SessionService
from resume_match_rag.rag_classes.vector_index.vector_index import VectorIndex


async def run(resume_path: str, job_description_path: str, questions: list[str]) -> None:
    service = SessionService(pipeline=GroundedAnsweringPipeline(vector_index=VectorIndex()))

    session_id = service.upload_resume(load_document_text(resume_path))
    service.upload_job_description(session_id, load_document_text(job_description_path))

    report = await service.analyze(session_id)
    analysis = report.analysis
    highlights = report.resume_highlights

    print("Match Analysis:")
    print(f"Match Score: {analysis.match_score}")
    print(f"Strengths: {'; '.join(analysis.strengths) if analysis.strengths else 'None'}")
    print(f"Gaps: {'; '.join(analysis.gaps) if analysis.gaps else 'None'}")
    print(f"Insights: {' '.join(analysis.insights)}")
    print(f"Skills: {', '.join(highlights.skills) if highlights.skills else 'None'}")
    print(f"Experience: {highlights.experience}")
    print(f"Education: {highlights.education}")

    await service.wait_for_indexing(session_id)
    for question in questions:
        response = await service.ask(session_id, question)
        print(f"\nQ: {question}")
        print(f"A: {response.answer}")
        print(f"Sources: {', '.join(response.sources) if response.sources else 'None'}")


def main():
    if len(sys.argv) < 3:
        print("Usage: python match_resume_cli.py <resume_path> <job_description_path> [question ...]")
        sys.exit(1)

    asyncio.run(run(sys.argv[1], sys.argv[2], sys.argv[3:]))


if __name__ == "__main__":
    main()
