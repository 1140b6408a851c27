import plotly.express as px

STATUS_COLORS = {"Completed": "#34d399", "Remaining": "#1e293b"}


def breakdown_bar(df, title="Today's habits"):
    # df from features.insights.progress_breakdown; expects columns: status, count
    if df is None or df.empty or df["count"].sum() == 0:
        return None

    fig = px.bar(
        df, x="count", y="status", color="status", orientation="h",
        color_discrete_map=STATUS_COLORS, title=title, text="count",
    )
    fig.update_layout(
        template="plotly_dark",
        height=220,
        margin=dict(l=16, r=16, t=52, b=16),
        title=dict(x=0.02),
        font=dict(size=13),
        showlegend=False,
    )
    fig.update_xaxes(showgrid=True, gridcolor="rgba(255,255,255,0.08)", title="habits", dtick=1)
    fig.update_yaxes(title="")
    return fig
