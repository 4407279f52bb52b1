"""
stream-build-config: build configuration and task collection.
"""

from invoke import Collection

from .config import BuildConfiguration, VersionInfo, load_build_configuration

# Create namespace and collect tasks from each submodule
namespace = Collection()

from .tasks import config_show

for submodule in [config_show]:
    submodule_collection = Collection.from_module(submodule)
    for task_name, task in submodule_collection.tasks.items():
        namespace.add_task(task)

__all__ = [
    'BuildConfiguration',
    'VersionInfo',
    'load_build_configuration',
    'namespace'
]
