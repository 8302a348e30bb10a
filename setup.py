from setuptools import setup, find_packages
import os
import sys

def create_git_hook():
    """
    Create a pre-commit git hook to run tests before committing code.
    """
    git_hooks_dir = os.path.join(os.getcwd(), '.git', 'hooks')
    pre_commit_path = os.path.join(git_hooks_dir, 'pre-commit')

    # Check if .git directory exists
    if not os.path.exists(git_hooks_dir):
        print("Not a git repository. Skipping git hook installation.")
        return

    # Get the path of the Python interpreter used for pip installation
    python_executable = sys.executable

    hook_content = f"""#!/bin/bash
"{python_executable}" -m pytest tests
if [ $? -ne 0 ]; then
  echo "Tests failed. Aborting commit."
  exit 1
fi
"""

    # Write the pre-commit hook
    with open(pre_commit_path, 'w') as hook_file:
        hook_file.write(hook_content)

    # Make the hook executable
    os.chmod(pre_commit_path, 0o775)
    print("Pre-commit hook created at .git/hooks/pre-commit")

create_git_hook()

setup(
    name="sinum",
    version="0.4.0",
    packages=find_packages(include=['sinum', 'sinum.*']),
    include_package_data=True,
    description="Numbers and quantities with SI prefixes and units",
    tests_require=['pytest'],
    extras_require={'test': ['pytest']},
    package_data={'sinum': ['locales/*.yaml']},
    install_requires=[
        'numpy',
        'pint',
        'rich',
        'pyyaml',
    ],
)
