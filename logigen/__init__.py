"""logigen -- a command-line code scaffolder.

Generates components, hooks, services, models, controllers and routes for
React, Vue and Express projects from Jinja2 templates, deriving file and
identifier names from a single base name.

Quick usage::

    from logigen.scaffolder import CodeGenerator, GenerationOptions

    generator = CodeGenerator()
    result = await generator.generate(
        "model",
        GenerationOptions(name="blog post", typescript=True, fields="title, views:number"),
    )
"""

__version__ = "1.0.0"
