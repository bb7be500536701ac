"""
Command line interface for config.xml editing.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""
