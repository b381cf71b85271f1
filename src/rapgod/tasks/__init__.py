"""
Task subsystem.

Components:
- task_models.py: the task variants (ToDo, Deadline, Event) and their type tags
- dates.py: date/time parsing with ordered fallback + rendering
- task_codec.py: display/storage lines and the fixed-offset line parser
- task_store.py: line-file persistence of the ordered task list
- errors.py: error kinds shared by the above
"""
