"""Build-pipeline graph generator.

Detects which ecosystem plugins apply to a project root and assembles
the DAG of pipeline tasks each plugin contributes.
"""
