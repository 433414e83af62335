from enums.theme import Theme
from pages.main_page import MainPage
from pages.settings_modal import SettingsModal


class QueryService:

    def run_query(self, page, config, query) -> str:
        main_page = MainPage(page, config)
        main_page.set_query_text(query)
        main_page.click_run_query_button()
        return main_page.get_query_result_text()

    def configure_connection(self, page, config, uri, database, collection,
                             theme: Theme | str | None = None, apply=True):
        settings_modal = SettingsModal(page, config)
        settings_modal.set_uri(uri)
        settings_modal.set_database_name(database)
        settings_modal.set_collection_name(collection)

        if theme is not None:
            settings_modal.select_theme(theme)

        if apply:
            settings_modal.click_apply_button()
        else:
            settings_modal.click_cancel_button()

    def rerun_history_query(self, page, config, random_entry=False) -> str:
        main_page = MainPage(page, config)

        if random_entry:
            main_page.click_random_item_in_history()
        else:
            main_page.find_click_minus_two_queries_in_history()

        main_page.click_run_query_button()
        return main_page.get_query_result_text()
