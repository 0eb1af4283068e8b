# Streamlit views
