"""
Task organization structures.

Components:
- task_models.py: data structures (Task, Priority) and form-value parsing
- task_list.py: ordered task collection (priority desc, due date asc)
- urgent_queue.py: FIFO of high-priority task references
- category_tree.py: category/subcategory tree holding task references
- history.py: undo/redo stacks of recorded actions
"""
