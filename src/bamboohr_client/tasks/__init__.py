"""
Command line tasks for the BambooHR client.

Exposed as the ``bamboohr`` console script through an invoke Program.
"""

from invoke import Collection, Program

from .. import __version__
from . import auth, endpoints

namespace = Collection()

for submodule in [auth, endpoints]:
    submodule_collection = Collection.from_module(submodule)
    for task_name, task in submodule_collection.tasks.items():
        namespace.add_task(task)

program = Program(namespace=namespace, name='bamboohr', binary='bamboohr', version=__version__)
