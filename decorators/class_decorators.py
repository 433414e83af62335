def auto_getters(cls):
    """
    Automatically generates getter methods for all DslLocator attributes
    defined in __init__ after initialization.
    Example: self.run_query_button -> get_run_query_button()
    """
    original_init = cls.__init__

    def new_init(self, *args, **kwargs):
        # Run the original __init__ first
        original_init(self, *args, **kwargs)

        # Generate only for DslLocator fields
        from wrappers.dsl_locator import DslLocator

        # Iterate over a static copy to avoid RuntimeError
        for name, value in list(self.__dict__.items()):
            if name.startswith("_"):  # skip private
                continue

            if isinstance(value, DslLocator):
                getter_name = f"get_{name}"
                if not hasattr(type(self), getter_name) and getter_name not in self.__dict__:
                    # Bind name properly in lambda default arg
                    setattr(self, getter_name, lambda n=name: getattr(self, n))

    cls.__init__ = new_init
    return cls
