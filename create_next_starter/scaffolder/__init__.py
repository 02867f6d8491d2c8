"""create-next-starter scaffolder -- copies the bundled starter into place.

Quick usage::

    from create_next_starter.scaffolder import ProjectGenerator

    generator = ProjectGenerator()
    target = await generator.create_directory("./my-next-app")
    await generator.copy_template(target)
    await generator.update_manifest(target, "my-next-app")
    await generator.rename_ignore_file(target)
"""

from create_next_starter.scaffolder.generator import ProjectGenerator
from create_next_starter.scaffolder.manifest import (
    ManifestError,
    read_manifest,
    set_manifest_name,
    write_manifest,
)

__all__ = [
    "ManifestError",
    "ProjectGenerator",
    "read_manifest",
    "set_manifest_name",
    "write_manifest",
]
