from rest_exposed.services.options import InMemoryOptionStore

NS = "rest_api_exposed_post_types"


def seed(store: InMemoryOptionStore, **flags) -> InMemoryOptionStore:
    """Store a slug list plus one flag per slug, like the settings page does.

    A flag of None stores the slug without its flag option.
    """
    store.update_option(NS, list(flags))
    for slug, flag in flags.items():
        if flag is not None:
            store.update_option(f"{NS}_{slug}", flag)
    return store
