"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskPriority)
- task_codec.py: one-line text format (encode_task / decode_task)
- task_file.py: file-backed sink for the encoded lines
- task_store.py: TaskManager, the in-memory list + all mutations and queries
"""
