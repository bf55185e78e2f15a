"""Project scaffolder -- plans and writes the generated Express server.

Quick usage::

    from server_startup.config import AnswerSet, Language
    from server_startup.scaffolder import ProjectGenerator

    answers = AnswerSet(project_name="demo", language=Language.TS)
    project_path = await ProjectGenerator(answers).generate("/tmp/output")
"""

from server_startup.scaffolder.generator import ProjectGenerator
from server_startup.scaffolder.installer import DependencyInstaller
from server_startup.scaffolder.planner import FilePlan, FileTask, plan
from server_startup.scaffolder.templates import TemplateRenderer

__all__ = [
    "DependencyInstaller",
    "FilePlan",
    "FileTask",
    "ProjectGenerator",
    "TemplateRenderer",
    "plan",
]
