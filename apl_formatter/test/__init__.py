"""
apl_formatter test package

- test_lexer.py: condition tokenizing
- test_parser.py: AND/OR tree construction
- test_printer.py: indented rendering
- test_transformer.py: talent rewrite and token mapping
- test_processor.py: key / entry splitting
- test_grouper.py: grouping and report presentation
- test_config.py: configuration loading
- test_cli.py: command-line entry point
- test_viewer.py: interactive viewer panels
"""
