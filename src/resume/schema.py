"""
Resume document model.

The editor sends camelCase JSON (``personalInfo``, ``startDate``); models
accept either the camelCase alias or the snake_case field name and are frozen
so edits always produce a new document.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.layout.format_config import Margins, ResumeFormat
from src.layout.units import PageSize


class _DocumentModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class PersonalInfo(_DocumentModel):
    name: str = ""
    title: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""


class WorkExperience(_DocumentModel):
    id: str = ""
    company: str = ""
    position: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: List[str] = Field(default_factory=list, description="Bullet lines")


class Education(_DocumentModel):
    id: str = ""
    school: str = ""
    degree: str = ""
    field: str = ""
    graduation_date: str = ""
    gpa: Optional[str] = None


class ResumeContent(_DocumentModel):
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    summary: str = ""
    experience: List[WorkExperience] = Field(default_factory=list)
    education: List[Education] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)


class ResumeSchema(_DocumentModel):
    """A complete resume: content plus format configuration."""
    content: ResumeContent = Field(default_factory=ResumeContent)
    format: ResumeFormat = Field(default_factory=ResumeFormat)


def default_resume() -> ResumeSchema:
    """Sample resume the editor starts from."""
    return ResumeSchema(
        content=ResumeContent(
            personal_info=PersonalInfo(
                name="John Doe",
                title="Senior Software Engineer",
                email="john.doe@email.com",
                phone="(555) 123-4567",
                location="San Francisco, CA",
            ),
            summary=(
                "Experienced software engineer with 8+ years of expertise in full-stack "
                "development. Proven track record of building scalable web applications "
                "and leading development teams. Passionate about clean code, user "
                "experience, and continuous learning."
            ),
            experience=[
                WorkExperience(
                    id="1",
                    company="Tech Corp",
                    position="Senior Software Engineer",
                    start_date="2020-01",
                    end_date="",
                    current=True,
                    description=[
                        "Led development of core platform features serving 1M+ users",
                        "Architected microservices infrastructure reducing response time by 40%",
                        "Mentored junior developers and established coding standards",
                        "Collaborated with product team to define technical requirements",
                    ],
                ),
                WorkExperience(
                    id="2",
                    company="StartupXYZ",
                    position="Full Stack Developer",
                    start_date="2018-03",
                    end_date="2019-12",
                    current=False,
                    description=[
                        "Built responsive web applications using React and Node.js",
                        "Implemented CI/CD pipelines improving deployment efficiency by 60%",
                        "Developed RESTful APIs handling 10K+ requests per minute",
                        "Optimized database queries reducing load times by 50%",
                    ],
                ),
                WorkExperience(
                    id="3",
                    company="Digital Agency",
                    position="Junior Developer",
                    start_date="2016-06",
                    end_date="2018-02",
                    current=False,
                    description=[
                        "Developed custom WordPress themes and plugins",
                        "Created responsive websites for 20+ clients",
                        "Collaborated with designers to implement pixel-perfect designs",
                        "Maintained and updated existing client websites",
                    ],
                ),
            ],
            education=[
                Education(
                    id="1",
                    school="University of California, Berkeley",
                    degree="Bachelor of Science",
                    field="Computer Science",
                    graduation_date="2016-05",
                    gpa="3.8",
                ),
            ],
            skills=[
                "JavaScript", "TypeScript", "React", "Node.js", "Python", "PostgreSQL",
                "MongoDB", "AWS", "Docker", "Git", "REST APIs", "GraphQL",
            ],
        ),
        format=ResumeFormat(
            font_family="Arial",
            font_size=11,
            line_height=1.4,
            margins=Margins(top=20, right=20, bottom=20, left=20),
            page_size=PageSize.A4,
            section_spacing=16,
            item_spacing=8,
        ),
    )
